import os

os.environ.setdefault("DB_DSN", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("AUTO_CREATE_ADMIN", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from zip_api.main import app
from zip_api.core.security import hash_password, issue_token
from zip_api.db.base import Base
from zip_api.db.session import get_db, enable_sqlite_foreign_keys
from zip_api.db.models.county import County
from zip_api.db.models.city import City
from zip_api.db.models.user import User

USER_PASSWORD = "secret123"


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def user(db):
    u = User(name="Test User", email="test@example.com", password_hash=hash_password(USER_PASSWORD))
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture()
def auth_headers(user):
    return {"Authorization": f"Bearer {issue_token(user.id)}"}


@pytest.fixture()
def make_county(db):
    def _make(name="Pest"):
        c = County(name=name)
        db.add(c)
        db.commit()
        db.refresh(c)
        return c
    return _make


@pytest.fixture()
def make_city(db):
    def _make(county, name, zip_code=1000):
        city = City(name=name, zip_code=zip_code, county_id=county.id)
        db.add(city)
        db.commit()
        db.refresh(city)
        return city
    return _make
