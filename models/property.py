# models/property.py
from sqlalchemy import Column, Integer, String, Text, Numeric
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class Property(RecordMixin, Base):
     """
     Property model - a rentable home or unit.
     """
     __tablename__ = "properties"

     # Address
     address = Column(Text, nullable=False)
     city = Column(String(100), nullable=False)
     state = Column(String(50), nullable=False)
     zip_code = Column(String(20), nullable=False)

     # Layout
     bedrooms = Column(Integer, nullable=False)
     bathrooms = Column(Numeric(3, 1), nullable=False)  # half baths allowed

     rent_amount = Column(Numeric(10, 2), nullable=False)
     description = Column(Text, nullable=True)
     image_url = Column(String(500), nullable=True)

     # Relationships
     leases = relationship("Lease", back_populates="property", passive_deletes="all")
     maintenance_requests = relationship("MaintenanceRequest", back_populates="property", passive_deletes="all")

     def __repr__(self):
          return f"<Property(id={self.id}, address='{self.address}')>"
