from __future__ import annotations

from passlib.context import CryptContext
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from zip_api.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Signed bearer token (stateless)
serializer = URLSafeTimedSerializer(settings.SECRET_KEY, salt="zip_api_token")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def issue_token(user_id: int) -> str:
    return serializer.dumps({"user_id": user_id})


def verify_token(token: str, max_age_seconds: int | None = None) -> dict | None:
    try:
        return serializer.loads(token, max_age=max_age_seconds or settings.TOKEN_MAX_AGE_SECONDS)
    except (BadSignature, SignatureExpired):
        return None
