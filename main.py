# main.py
"""
RentDesk API - property, tenant, lease, payment and maintenance records for
the property management dashboard.

Run locally:
     uvicorn main:app --reload
"""
import logging

import uvicorn
from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

import config
from database import check_connection, get_session
from errors import setup_exception_handlers
from routers import ALL_ROUTERS

config.configure_logging()
config.require_settings()
logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="RentDesk API", version="1.0.0")

# CORS
app.add_middleware(
     CORSMiddleware,
     allow_origins=config.CORS_ORIGINS,
     allow_credentials=True,
     allow_methods=["*"],
     allow_headers=["*"],
)

setup_exception_handlers(app)

for router in ALL_ROUTERS:
     app.include_router(router)


@app.get("/health", tags=["health"])
def health(db: Session = Depends(get_session)):
     """Liveness plus a round trip to the database."""
     if not check_connection(db):
          return JSONResponse(
               status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
               content={"status": "degraded", "database": "unavailable"},
          )
     return {"status": "ok", "database": "ok"}


if __name__ == "__main__":
     logger.info("Starting RentDesk API on port %s", config.PORT)
     uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)
