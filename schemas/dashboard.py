# schemas/dashboard.py
from typing import List
from pydantic import Field, ConfigDict

from .common import CamelModel, Money


class DashboardMetrics(CamelModel):
     """Snapshot shown on the dashboard landing page."""
     total_properties: int
     occupied_properties: int
     vacant_properties: int
     monthly_revenue: Money
     overdue_payments: Money
     open_requests: int
     is_demo: bool = Field(False, description="True when computed from the seeded demo data")
     data_quality_warnings: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          frozen=True,
          json_schema_extra={
               "example": {
                    "totalProperties": 4,
                    "occupiedProperties": 3,
                    "vacantProperties": 1,
                    "monthlyRevenue": 8200.00,
                    "overduePayments": 2200.00,
                    "openRequests": 3,
                    "isDemo": True,
                    "dataQualityWarnings": []
               }
          }
     )
