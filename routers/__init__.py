# routers/__init__.py
from . import auth, dashboard, documents, leases, maintenance, payments, properties, tenants

ALL_ROUTERS = [
     auth.router,
     dashboard.router,
     properties.router,
     tenants.router,
     leases.router,
     payments.router,
     maintenance.router,
     documents.router,
]

__all__ = ["ALL_ROUTERS"]
