# services/maintenance_service.py
import logging
from typing import List

from sqlalchemy.orm import Session

from database import store_guard
from models import MaintenanceRequest, MaintenancePriority
from models.maintenance_request import OPEN_STATUSES
from .repository import maintenance_requests

logger = logging.getLogger(__name__)


class MaintenanceService:
     """Service class for maintenance request queries and transitions."""

     @staticmethod
     def high_priority_requests(db: Session) -> List[MaintenanceRequest]:
          """HIGH priority requests that are not completed yet, newest first."""
          with store_guard("high priority requests"):
               return (
                    db.query(MaintenanceRequest)
                    .filter(
                         MaintenanceRequest.priority == MaintenancePriority.HIGH,
                         MaintenanceRequest.status.in_(OPEN_STATUSES),
                    )
                    .order_by(MaintenanceRequest.reported_date.desc())
                    .all()
               )

     @staticmethod
     def complete_request(db: Session, request_id: str) -> MaintenanceRequest:
          """
          Mark a request COMPLETED, stamping the completion time.

          Raises:
               NotFound: no request with this id
          """
          request = maintenance_requests.require(db, request_id)
          request.mark_as_completed()
          with store_guard("complete maintenance request"):
               db.commit()
               db.refresh(request)
          logger.info("Maintenance request %s completed", request.id)
          return request
