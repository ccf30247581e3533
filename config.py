# config.py
"""
Application settings read from the environment.

Values come from the process environment, with a local `.env` file loaded
first through python-dotenv. Every module reads settings from here instead of
calling os.getenv on its own.
"""
import logging
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load .env
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
     return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _build_database_url() -> str:
     """
     Use DATABASE_URL when given, otherwise build the Azure SQL (MS SQL Server)
     URL from the DB_* variables.
     """
     url = os.getenv("DATABASE_URL")
     if url:
          return url

     safe_user = quote_plus(os.getenv("DB_USER") or "")
     safe_pass = quote_plus(os.getenv("DB_PASS") or "")
     server = os.getenv("DB_SERVER")
     port = os.getenv("DB_PORT", "1433")
     name = os.getenv("DB_NAME")
     return f"mssql+pymssql://{safe_user}:{safe_pass}@{server}:{port}/{name}"


# Database
DATABASE_URL = _build_database_url()
SQL_ECHO = _env_flag("SQL_ECHO")

# Auth (tokens are issued by the identity provider, we only verify them)
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
DEMO_TOKEN_TTL_SECONDS = int(os.getenv("DEMO_TOKEN_TTL_SECONDS", "3600"))

# HTTP
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]
PORT = int(os.getenv("PORT", "10000"))

# Show seeded demo rows on list endpoints while the store is empty
DEMO_FALLBACK = _env_flag("DEMO_FALLBACK", "true")

# Document storage
AZURE_STORAGE_ACCOUNT = os.getenv("AZURE_STORAGE_ACCOUNT")
AZURE_STORAGE_KEY = os.getenv("AZURE_STORAGE_KEY")
AZURE_DOCUMENTS_CONTAINER = os.getenv("AZURE_DOCUMENTS_CONTAINER", "lease-documents")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
     """Install a single stream handler on the root logger."""
     logging.basicConfig(level=level, format=LOG_FORMAT)
     logging.getLogger().setLevel(level)


def require_settings() -> None:
     """Refuse to start without the settings that have no safe default."""
     if not JWT_SECRET:
          raise RuntimeError("JWT_SECRET must be set to verify bearer tokens")
