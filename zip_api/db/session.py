from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from zip_api.core.config import settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(dsn: str) -> Engine:
    if dsn.startswith("sqlite"):
        engine = create_engine(dsn, connect_args={"check_same_thread": False})
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(
        dsn,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=30,
    )


engine = build_engine(settings.DB_DSN)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
