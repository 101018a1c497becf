import os

# アプリを import する前にテスト用の設定を入れる
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IDENTITY_JWT_SECRET"] = "test-identity-secret"
os.environ.pop("IDENTITY_JWT_AUDIENCE", None)

from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from auth.identity import create_identity_token
from db.database import Base, SessionLocal, engine
from main import app


@pytest.fixture(autouse=True)
def _reset_db() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    def _headers(subject: str = "u1", name: str = "Fern Owner", email: str = "u1@example.com") -> Dict[str, str]:
        token = create_identity_token(subject, name, email)
        return {"Authorization": f"Bearer {token}"}

    return _headers
