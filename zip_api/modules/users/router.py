from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from zip_api.db.session import get_db
from zip_api.auth.deps import get_current_user
from zip_api.db.models.user import User

router = APIRouter(prefix="/users", tags=["users"])


class UserOut(BaseModel):
    id: int
    name: str
    email: str


class UserListResponse(BaseModel):
    users: list[UserOut]


@router.get("", response_model=UserListResponse)
def index(db: Session = Depends(get_db), user=Depends(get_current_user)):
    users = db.query(User).order_by(User.id.asc()).all()
    return UserListResponse(users=[UserOut(id=u.id, name=u.name, email=u.email) for u in users])
