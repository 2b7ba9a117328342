from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from zip_api.auth.schemas import LoginRequest, LoginResponse, LoggedInUser
from zip_api.core.exceptions import InvalidCredentialsException
from zip_api.core.security import verify_password, issue_token
from zip_api.db.models.user import User
from zip_api.db.session import get_db

logger = logging.getLogger("zip_api.auth")

router = APIRouter(prefix="/users", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    email = body.email.strip()
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(body.password, user.password_hash):
        logger.info("Rejected login for %s", email)
        raise InvalidCredentialsException()

    token = issue_token(user.id)
    return LoginResponse(user=LoggedInUser(id=user.id, email=user.email, token=token))
