# models/tenant.py
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class Tenant(RecordMixin, Base):
     """
     Tenant model - a person renting one of the properties.
     Optionally linked to a User when the tenant signs in.
     """

     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=False, unique=True, index=True)
     phone = Column(String(50), nullable=True)
     user_id = Column(String(36), ForeignKey("users.id"), nullable=True, unique=True)

     # Relationships
     user = relationship("User", back_populates="tenant")
     leases = relationship("Lease", back_populates="tenant", passive_deletes="all")
     maintenance_requests = relationship("MaintenanceRequest", back_populates="tenant", passive_deletes="all")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}')>"
