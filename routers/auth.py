# routers/auth.py
"""
Auth routes.

Sign-in itself belongs to the identity provider. These routes expose the
signed-in user and a demo login for trying the dashboard without an account.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session, store_guard
from dependencies import issue_token, verify_token
from errors import NotFound
from models import User
from schemas.user import UserResponse, DemoLoginResponse
from services.demo_data import DEMO_USER

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/demo-login", response_model=DemoLoginResponse, summary="Sign in as the demo user")
def demo_login():
     token = issue_token(
          DEMO_USER.id,
          email=DEMO_USER.email,
          first_name=DEMO_USER.first_name,
          last_name=DEMO_USER.last_name,
     )
     return DemoLoginResponse(token=token)


@router.get("/auth/user", response_model=UserResponse, summary="Current user")
def get_current_user(db: Session = Depends(get_session), token: dict = Depends(verify_token)):
     user_id = token["sub"]
     if user_id == DEMO_USER.id:
          return DEMO_USER

     with store_guard("get user"):
          user = db.get(User, user_id)
     if user is None:
          raise NotFound("User not found")
     return user
