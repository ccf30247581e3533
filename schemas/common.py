# schemas/common.py
"""
Shared pieces for the API schemas.

Request and response bodies use camelCase keys on the wire; requests also
accept the snake_case field names.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


CENT = Decimal("0.01")

# Decimal internally, plain JSON number on the way out
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
     """Base schema with camelCase aliases."""
     model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordResponse(CamelModel):
     """Fields every stored record carries."""
     id: str
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True, frozen=True)


def is_half_step(value: Decimal) -> bool:
     """True for 0, 0.5, 1, 1.5, ..."""
     return (value * 2) % 1 == 0
