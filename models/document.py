# models/document.py
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class Document(RecordMixin, Base):
     """
     Document model - a file attached to a lease (signed lease, inspection
     report, ...). The file itself lives in blob storage; only the URL is kept.
     """

     lease_id = Column(String(36), ForeignKey("leases.id"), nullable=False, index=True)
     file_name = Column(String(255), nullable=False)
     file_url = Column(String(1000), nullable=False)
     document_type = Column(String(100), nullable=False)

     # Relationships
     lease = relationship("Lease", back_populates="documents")

     def __repr__(self):
          return f"<Document(id={self.id}, file_name='{self.file_name}')>"
