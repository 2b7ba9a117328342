from __future__ import annotations

import os
import time
import logging
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from zip_api.core.config import settings

logger = logging.getLogger("zip_api.bootstrap")


def wait_for_db(engine: Engine, timeout_s: int = 60) -> None:
    """Wait until the database is accepting connections."""
    start = time.time()
    delay = 1.0

    while True:
        try:
            with engine.begin() as conn:
                conn.execute(text("SELECT 1"))
            return
        except OperationalError as e:
            if time.time() - start > timeout_s:
                raise
            logger.info("Database not ready yet (%s), retrying in %.1fs", e.orig, delay)
            time.sleep(delay)
            delay = min(delay * 1.5, 5.0)


def ensure_admin(db: Session) -> bool:
    """Create the default admin once. Returns True when a user was created."""
    from zip_api.db.models.user import User
    from zip_api.core.security import hash_password

    exists = db.query(User).filter(User.email == settings.DEFAULT_ADMIN_EMAIL).first()
    if exists:
        return False
    db.add(
        User(
            name=settings.DEFAULT_ADMIN_NAME,
            email=settings.DEFAULT_ADMIN_EMAIL,
            password_hash=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
        )
    )
    return True


def main() -> int:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    from zip_api.db.base import Base
    from zip_api.db.session import engine, SessionLocal
    import zip_api.db.models  # noqa: F401

    wait_for_db(engine, timeout_s=int(os.getenv("DB_WAIT_TIMEOUT", "90")))

    # No migration tooling: create whatever tables are missing
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready")

    if settings.AUTO_CREATE_ADMIN:
        db = SessionLocal()
        try:
            if ensure_admin(db):
                logger.info("Created default admin %s", settings.DEFAULT_ADMIN_EMAIL)
            db.commit()
        finally:
            db.close()

    # Seed sample dataset (idempotent)
    if settings.AUTO_SEED_SAMPLE:
        from zip_api.scripts.seed_sample import seed_sample

        db2 = SessionLocal()
        try:
            seed_sample(db2)
            db2.commit()
            logger.info("Sample data seeded")
        finally:
            db2.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
