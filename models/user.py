# models/user.py
import enum
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class UserRole(str, enum.Enum):
     ADMIN = "ADMIN"
     TENANT = "TENANT"


class User(RecordMixin, Base):
     """
     User model - mirror of the identity provider's account.
     Credentials never live here; the provider owns them.
     """

     email = Column(String(255), unique=True, nullable=True, index=True)
     first_name = Column(String(100), nullable=True)
     last_name = Column(String(100), nullable=True)
     profile_image_url = Column(String(500), nullable=True)
     role = Column(
          Enum(UserRole, name="user_role", create_constraint=True),
          default=UserRole.TENANT,
          nullable=False,
     )

     # Relationships
     tenant = relationship("Tenant", back_populates="user", uselist=False, passive_deletes="all")

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
