# models/maintenance_request.py
import enum
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class MaintenanceStatus(str, enum.Enum):
     PENDING = "PENDING"
     IN_PROGRESS = "IN_PROGRESS"
     COMPLETED = "COMPLETED"


class MaintenancePriority(str, enum.Enum):
     LOW = "LOW"
     MEDIUM = "MEDIUM"
     HIGH = "HIGH"


OPEN_STATUSES = (MaintenanceStatus.PENDING, MaintenanceStatus.IN_PROGRESS)


class MaintenanceRequest(RecordMixin, Base):
     """
     MaintenanceRequest model - repair work reported by a tenant.
     """

     property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
     tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=False, index=True)

     description = Column(Text, nullable=False)
     status = Column(
          Enum(MaintenanceStatus, name="maintenance_status", create_constraint=True),
          default=MaintenanceStatus.PENDING,
          nullable=False,
          index=True
     )
     priority = Column(
          Enum(MaintenancePriority, name="maintenance_priority", create_constraint=True),
          default=MaintenancePriority.MEDIUM,
          nullable=False,
          index=True
     )
     reported_date = Column(DateTime, server_default=func.now(), nullable=False)
     completed_date = Column(DateTime, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="maintenance_requests")
     tenant = relationship("Tenant", back_populates="maintenance_requests")

     def __repr__(self):
          return f"<MaintenanceRequest(id={self.id}, status='{self.status.value}', priority='{self.priority.value}')>"

     def mark_as_completed(self) -> None:
          self.status = MaintenanceStatus.COMPLETED
          self.completed_date = self.completed_date or datetime.now()
