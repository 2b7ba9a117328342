from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from zip_api.db.session import get_db
from zip_api.core.security import verify_token
from zip_api.core.exceptions import UnauthorizedException
from zip_api.db.models.user import User

# auto_error=False: a missing header must answer 401, not FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException()
    payload = verify_token(credentials.credentials)
    if not payload or "user_id" not in payload:
        raise UnauthorizedException()
    user = db.get(User, payload["user_id"])
    if not user:
        raise UnauthorizedException()
    return user
