# dependencies.py
"""
Request dependencies shared by the routers.

Sign-in happens at the identity provider. Requests carry the provider's JWT
as a bearer token; we only verify its signature and expiry and read the
claims.
"""
import time
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

import config
from errors import Unauthorized


def verify_token(request: Request) -> dict:
     """
     FastAPI dependency returning the verified token claims.

     Raises:
          Unauthorized: header missing, malformed, expired or badly signed
     """
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise Unauthorized("Missing token")
     token = auth.split(" ", 1)[1].strip()
     try:
          payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
     except JWTError:
          raise Unauthorized("Invalid token")
     if not payload.get("sub"):
          raise Unauthorized("Invalid token")
     return payload


def issue_token(subject: str, ttl_seconds: Optional[int] = None, **claims) -> str:
     """Sign a token the way the identity provider does (used for demo login)."""
     ttl = config.DEMO_TOKEN_TTL_SECONDS if ttl_seconds is None else ttl_seconds
     payload = dict(claims, sub=subject, exp=int(time.time()) + ttl)
     return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)
