"""
Application exceptions.

Every error leaves the API as ``{"message": <detail>}``; the handlers that
render them live in ``zip_api.main``.
"""

from fastapi import HTTPException, status


COUNTY_NOT_FOUND = "County not found"
CITY_NOT_FOUND = "City not found in the specified county"
UNAUTHENTICATED = "Unauthenticated."
INVALID_CREDENTIALS = "Invalid email or password"


class AppException(HTTPException):
    """Base application exception."""

    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR, headers: dict | None = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class UnauthorizedException(AppException):
    """Missing or invalid bearer token."""

    def __init__(self, detail: str = UNAUTHENTICATED):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidCredentialsException(AppException):
    """Login rejected."""

    def __init__(self, detail: str = INVALID_CREDENTIALS):
        super().__init__(detail=detail, status_code=status.HTTP_401_UNAUTHORIZED)
