from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str
    password: str


class LoggedInUser(BaseModel):
    id: int
    email: str
    token: str


class LoginResponse(BaseModel):
    user: LoggedInUser
