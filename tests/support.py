"""Shared helpers: in-memory SQLite sessions, user factories and an API test base class."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from reviewgate.core.database import get_db
from reviewgate.core.security import hash_password
from reviewgate.main import app
from reviewgate.models import Base, User, UserRole


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with the schema created; one connection shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_user(
    db: Session,
    email: str = "a@b.com",
    password: str = "secret123",
    role: UserRole = UserRole.USER,
) -> User:
    user = User(email=email, password_hash=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def token_from_set_cookie(set_cookie: str) -> str:
    """Value of the session cookie from a Set-Cookie header."""
    first = set_cookie.split(";", 1)[0]
    name, _, value = first.partition("=")
    assert name == "token", set_cookie
    return value


class ApiTestCase(unittest.TestCase):
    """Runs the real app against a per-test SQLite database."""

    def setUp(self) -> None:
        self.SessionTest = make_session_factory()
        self.db = self.SessionTest()

        def _get_test_db():
            db = self.SessionTest()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_test_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.pop(get_db, None)
        self.db.close()

    def login(self, email: str, password: str) -> str:
        response = self.client.post("/api/auth/login", json={"email": email, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return token_from_set_cookie(response.headers["set-cookie"])

    @staticmethod
    def cookie(token: str) -> dict[str, str]:
        return {"Cookie": f"token={token}"}

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
