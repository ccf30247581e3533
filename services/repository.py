# services/repository.py
"""
Repository - list/get/create/update/delete for one entity type.

Every entity gets the same five operations over a SQLAlchemy session.
Input is validated against the entity's create schema before anything is
written, and partial updates are re-validated against the merged record so
cross-field rules (lease period, PAID needs a payment date, ...) keep holding
after every update.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Type, Union

import pydantic
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import store_guard
from errors import Conflict, NotFound, ValidationError, pydantic_errors
from models import (
     Base,
     Property,
     Tenant,
     Lease,
     Payment,
     MaintenanceRequest,
     Document,
)
from schemas import (
     PropertyCreate,
     PropertyUpdate,
     TenantCreate,
     TenantUpdate,
     LeaseCreate,
     LeaseUpdate,
     PaymentCreate,
     PaymentUpdate,
     MaintenanceRequestCreate,
     MaintenanceRequestUpdate,
     DocumentCreate,
     DocumentUpdate,
)

logger = logging.getLogger(__name__)

Fields = Union[BaseModel, Mapping[str, Any]]


class Repository:
     """
     Data access for a single model.

     Args:
          model: SQLAlchemy model class
          create_schema: schema every stored row must satisfy
          update_schema: schema for partial updates (all fields optional)
          label: human name used in error messages ("Property")
          references: foreign key field -> referenced model
          unique: fields that must not repeat across rows
     """

     def __init__(
          self,
          model: Type[Base],
          create_schema: Type[BaseModel],
          update_schema: Type[BaseModel],
          label: str,
          references: Optional[Dict[str, Type[Base]]] = None,
          unique: tuple = (),
     ):
          self.model = model
          self.create_schema = create_schema
          self.update_schema = update_schema
          self.label = label
          self.references = references or {}
          self.unique = unique

     def __repr__(self):
          return f"<Repository({self.label})>"

     # ------------------------------------------------------------------
     # Reads
     # ------------------------------------------------------------------

     def list(self, db: Session) -> List[Base]:
          """All rows, newest first."""
          with store_guard(f"list {self.label}"):
               return db.query(self.model).order_by(self.model.created_at.desc()).all()

     def get(self, db: Session, record_id: str) -> Optional[Base]:
          with store_guard(f"get {self.label}"):
               return db.get(self.model, record_id)

     def require(self, db: Session, record_id: str) -> Base:
          """Like get, but a miss raises NotFound."""
          record = self.get(db, record_id)
          if record is None:
               raise NotFound(f"{self.label} not found")
          return record

     # ------------------------------------------------------------------
     # Writes
     # ------------------------------------------------------------------

     def create(self, db: Session, fields: Fields) -> Base:
          """
          Validate and insert a new row.

          Raises:
               ValidationError: invalid fields, unresolved reference or duplicate
          """
          values = self.validate_new(db, fields)
          record = self.model(**values)
          with store_guard(f"create {self.label}"):
               db.add(record)
               db.commit()
               db.refresh(record)

          logger.info("Created %s %s", self.label, record.id)
          return record

     def update(self, db: Session, record_id: str, fields: Fields) -> Base:
          """
          Apply a partial update.

          Raises:
               NotFound: no row with this id
               ValidationError: the merged record breaks a rule
          """
          record = self.require(db, record_id)
          changes = self._validate(self.update_schema, fields).model_dump(exclude_unset=True)

          merged = {name: getattr(record, name) for name in self.create_schema.model_fields}
          merged.update(changes)
          values = self._validate(self.create_schema, merged).model_dump()

          changed = {name: values[name] for name in changes}
          self.check_references(db, changed)
          self._check_unique(db, changed, exclude_id=record.id)

          for name, value in changed.items():
               setattr(record, name, value)
          with store_guard(f"update {self.label}"):
               db.commit()
               db.refresh(record)

          logger.info("Updated %s %s (%s)", self.label, record.id, ", ".join(sorted(changed)) or "no changes")
          return record

     def delete(self, db: Session, record_id: str) -> None:
          """
          Delete one row. Rows that reference it are left alone; the store
          refuses the delete while any exist.

          Raises:
               NotFound: no row with this id
               Conflict: other rows still reference this one
          """
          record = self.require(db, record_id)
          try:
               with store_guard(f"delete {self.label}"):
                    db.delete(record)
                    db.commit()
          except IntegrityError as e:
               db.rollback()
               logger.info("Refused to delete %s %s: %s", self.label, record_id, e.orig)
               raise Conflict(f"{self.label} is still referenced by other records") from e
          logger.info("Deleted %s %s", self.label, record_id)

     # ------------------------------------------------------------------
     # Validation helpers
     # ------------------------------------------------------------------

     def validate_new(self, db: Session, fields: Fields) -> Dict[str, Any]:
          """
          Check a new row without writing it: field rules, references and
          uniqueness. Returns the normalized column values.
          """
          values = self._validate(self.create_schema, fields).model_dump()
          self.check_references(db, values)
          self._check_unique(db, values)
          return values

     @staticmethod
     def _validate(schema: Type[BaseModel], fields: Fields) -> BaseModel:
          if isinstance(fields, BaseModel):
               fields = fields.model_dump(exclude_unset=True)
          try:
               return schema.model_validate(fields)
          except pydantic.ValidationError as e:
               raise ValidationError(pydantic_errors(e.errors())) from e

     def check_references(self, db: Session, values: Mapping[str, Any]) -> None:
          """Every foreign key present in `values` must point at an existing row."""
          errors = []
          for field, target in self.references.items():
               if field not in values or values[field] is None:
                    continue
               with store_guard(f"resolve {field}"):
                    found = db.get(target, values[field])
               if found is None:
                    errors.append({
                         "field": to_camel(field),
                         "message": f"{target.__name__} {values[field]} not found",
                    })
          if errors:
               raise ValidationError(errors)

     def _check_unique(self, db: Session, values: Mapping[str, Any], exclude_id: Optional[str] = None) -> None:
          for field in self.unique:
               if field not in values:
                    continue
               query = db.query(self.model.id).filter(getattr(self.model, field) == values[field])
               if exclude_id is not None:
                    query = query.filter(self.model.id != exclude_id)
               with store_guard(f"check unique {field}"):
                    taken = query.first() is not None
               if taken:
                    raise ValidationError.for_field(to_camel(field), f"{field} already in use")


properties = Repository(Property, PropertyCreate, PropertyUpdate, "Property")

tenants = Repository(Tenant, TenantCreate, TenantUpdate, "Tenant", unique=("email",))

leases = Repository(
     Lease,
     LeaseCreate,
     LeaseUpdate,
     "Lease",
     references={"property_id": Property, "tenant_id": Tenant},
)

payments = Repository(
     Payment,
     PaymentCreate,
     PaymentUpdate,
     "Payment",
     references={"lease_id": Lease},
)

maintenance_requests = Repository(
     MaintenanceRequest,
     MaintenanceRequestCreate,
     MaintenanceRequestUpdate,
     "Maintenance request",
     references={"property_id": Property, "tenant_id": Tenant},
)

documents = Repository(
     Document,
     DocumentCreate,
     DocumentUpdate,
     "Document",
     references={"lease_id": Lease},
)
