# errors.py
"""
Domain exceptions and their mapping to HTTP responses.

Services raise these; `setup_exception_handlers` turns them into JSON bodies
of the form {"message": ..., "errors": [...]}.
"""
import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
     """Base class for errors the API knows how to report."""
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
     message = "Internal server error"

     def __init__(self, message: Optional[str] = None):
          super().__init__(message or self.message)
          self.message = message or self.message

     def to_body(self) -> dict:
          return {"message": self.message}


class ValidationError(AppError):
     """Client-fixable input problem, raised before anything is written."""
     status_code = status.HTTP_400_BAD_REQUEST
     message = "Invalid data"

     def __init__(self, errors: List[dict], message: Optional[str] = None):
          super().__init__(message)
          self.errors = errors

     @classmethod
     def for_field(cls, field: str, message: str) -> "ValidationError":
          return cls([{"field": field, "message": message}])

     def to_body(self) -> dict:
          return {"message": self.message, "errors": self.errors}


class NotFound(AppError):
     status_code = status.HTTP_404_NOT_FOUND
     message = "Not found"


class Conflict(AppError):
     """The change clashes with rows already stored (e.g. a row still referenced)."""
     status_code = status.HTTP_409_CONFLICT
     message = "Conflict with stored data"


class StoreUnavailable(AppError):
     """The entity store could not be reached. Never retried here."""
     status_code = status.HTTP_502_BAD_GATEWAY
     message = "Data store unavailable"


class Unauthorized(AppError):
     status_code = status.HTTP_401_UNAUTHORIZED
     message = "Unauthorized"


def pydantic_errors(errors) -> List[dict]:
     """
     Flatten pydantic error dicts into field/message pairs.
     The location prefix FastAPI adds ("body", "query") is dropped.
     """
     flattened = []
     for error in errors:
          loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
          flattened.append({
               "field": ".".join(loc) or None,
               "message": error.get("msg", "Invalid value"),
          })
     return flattened


def setup_exception_handlers(app: FastAPI) -> None:

     @app.exception_handler(AppError)
     async def app_error_handler(request: Request, exc: AppError):
          if isinstance(exc, StoreUnavailable):
               logger.error("%s %s: %s", request.method, request.url.path, exc.message)
          return JSONResponse(status_code=exc.status_code, content=exc.to_body())

     @app.exception_handler(StarletteHTTPException)
     async def http_exception_handler(request: Request, exc: StarletteHTTPException):
          return JSONResponse(
               status_code=exc.status_code,
               content={"message": str(exc.detail)},
               headers=getattr(exc, "headers", None),
          )

     @app.exception_handler(RequestValidationError)
     async def request_validation_handler(request: Request, exc: RequestValidationError):
          body = ValidationError(pydantic_errors(exc.errors())).to_body()
          return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)

     @app.exception_handler(IntegrityError)
     async def integrity_error_handler(request: Request, exc: IntegrityError):
          logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
          return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=Conflict().to_body())

     # Catch all unhandled exceptions
     @app.exception_handler(Exception)
     async def generic_exception_handler(request: Request, exc: Exception):
          logger.exception("Unhandled error on %s %s", request.method, request.url.path)
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content={"message": "Internal server error"},
          )
