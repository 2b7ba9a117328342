from __future__ import annotations

import time
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from zip_api.core.config import settings

# Import models to populate SQLAlchemy metadata (needed for create_all)
import zip_api.db.models  # noqa: F401

from zip_api.auth.router import router as auth_router
from zip_api.modules.counties.router import router as counties_router
from zip_api.modules.cities.router import router as cities_router
from zip_api.modules.users.router import router as users_router


logger = logging.getLogger("zip_api.http")


def _validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return errors


app = FastAPI(title=settings.APP_NAME)

# CORS (Access-Control-Allow-*) - configurable
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
)

app.add_middleware(GZipMiddleware, minimum_size=800)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start = time.perf_counter()
    resp = await call_next(request)
    resp.headers["X-Process-Time-ms"] = f"{(time.perf_counter() - start) * 1000:.2f}"
    return resp


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    resp = await call_next(request)
    resp.headers["X-Content-Type-Options"] = "nosniff"
    resp.headers["X-Frame-Options"] = "SAMEORIGIN"
    resp.headers["Referrer-Policy"] = "same-origin"
    return resp


@app.exception_handler(StarletteHTTPException)
async def http_exc_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exc_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"message": "The given data was invalid.", "errors": _validation_errors(exc)},
    )


@app.exception_handler(IntegrityError)
async def integrity_exc_handler(request: Request, exc: IntegrityError):
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"message": "Constraint violation"})


@app.exception_handler(Exception)
async def unhandled_exc_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# Routers
app.include_router(auth_router)
app.include_router(counties_router)
app.include_router(cities_router)
app.include_router(users_router)


@app.get("/health", response_class=JSONResponse)
def health():
    return {"status": "ok", "app": settings.APP_NAME}
