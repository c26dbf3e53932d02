import os

# Required settings must exist before the app modules are imported
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import get_db
from app.models import Base
from app.user_service import create_user_profile
from auth.jwt_handler import create_access_token
from main import app
from schemas.user import UserCreate

PASSWORD = "Secret#123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user(db_session):
    return create_user_profile(
        db_session,
        UserCreate(username="alice", email="alice@example.com", password=PASSWORD),
    )


@pytest.fixture
def auth_headers(user):
    token = create_access_token({"username": user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def task_payload(user):
    return {
        "subject": "Write the release notes",
        "description": "Summarise every change since the last tag",
        "status": "Pending",
        "username": user.username,
    }
