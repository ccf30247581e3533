# schemas/user.py
from typing import Optional
from pydantic import BaseModel

from models.user import UserRole
from .common import RecordResponse


class UserResponse(RecordResponse):
     email: Optional[str] = None
     first_name: Optional[str] = None
     last_name: Optional[str] = None
     profile_image_url: Optional[str] = None
     role: UserRole


class DemoLoginResponse(BaseModel):
     success: bool = True
     message: str = "Demo login successful"
     token: str
