# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (Azure SQL / MS SQL Server by default)
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
"""
import logging
import sqlite3
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

import config
from errors import StoreUnavailable

logger = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
     # SQLite ignores foreign keys unless asked per connection
     if isinstance(dbapi_connection, sqlite3.Connection):
          cursor = dbapi_connection.cursor()
          cursor.execute("PRAGMA foreign_keys=ON")
          cursor.close()


def make_engine(url: str = config.DATABASE_URL, echo: bool = config.SQL_ECHO) -> Engine:
     """
     Create the SQLAlchemy engine.

     Server databases get a bounded QueuePool; SQLite keeps the dialect's own
     pool because it does not accept the sizing arguments.
     """
     if url.startswith("sqlite"):
          return create_engine(url, echo=echo, connect_args={"check_same_thread": False})

     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          pool_pre_ping=True,
          echo=echo,
     )


# Create SQLAlchemy engine
engine = make_engine()

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def check_connection(db: Session) -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          db.execute(text("SELECT 1"))
          return True
     except DBAPIError as e:
          logger.warning("Database connection failed: %s", e.orig if e.orig is not None else e)
          return False


def is_connectivity_failure(error: DBAPIError) -> bool:
     """
     True when the driver could not reach the store: a connection the dialect
     reports as dropped, or a failure while connecting (no statement ran).
     """
     if error.connection_invalidated:
          return True
     return isinstance(error, (OperationalError, InterfaceError)) and error.statement is None


@contextmanager
def store_guard(action: str = "query") -> Generator[None, None, None]:
     """
     Re-raise connectivity failures from the driver as StoreUnavailable.
     Every other database error passes through untouched.
     """
     try:
          yield
     except DBAPIError as e:
          if not is_connectivity_failure(e):
               raise
          logger.error("Data store unavailable during %s: %s", action, e.orig if e.orig is not None else e)
          raise StoreUnavailable() from e
