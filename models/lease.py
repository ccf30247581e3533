# models/lease.py
import enum
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class LeaseStatus(str, enum.Enum):
     """Lifecycle stage of a rental agreement."""
     UPCOMING = "UPCOMING"
     ACTIVE = "ACTIVE"
     ENDED = "ENDED"


class Lease(RecordMixin, Base):
     """
     Lease model - rental agreement between a tenant and a property.
     """

     property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
     tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=False, index=True)

     # Lease period
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)

     monthly_rent = Column(Numeric(10, 2), nullable=False)
     status = Column(
          Enum(LeaseStatus, name="lease_status", create_constraint=True),
          default=LeaseStatus.UPCOMING,
          nullable=False,
          index=True
     )

     # Relationships
     property = relationship("Property", back_populates="leases")
     tenant = relationship("Tenant", back_populates="leases")
     payments = relationship("Payment", back_populates="lease", passive_deletes="all")
     documents = relationship("Document", back_populates="lease", passive_deletes="all")

     def __repr__(self):
          return f"<Lease(id={self.id}, tenant_id={self.tenant_id}, property_id={self.property_id})>"
