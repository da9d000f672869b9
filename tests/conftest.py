import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator

os.environ.setdefault("DATABASE_URL", "sqlite:///./fastbooking-test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-share-links-0123456789")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="fastbooking-logs-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.database import Base, get_db
from app.models.share_link import ShareLink  # noqa: F401
from app.models.user import User

T0 = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)


class StepClock:
    """Returns start, start + step, start + 2*step, ... on successive calls."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(minutes=1)) -> None:
        self.current = start
        self.step = step
        self.calls = []

    def __call__(self) -> datetime:
        value = self.current
        self.calls.append(value)
        self.current = value + self.step
        return value


@pytest.fixture()
def session_factory(tmp_path: Path) -> Iterator[sessionmaker]:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'share_links.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield factory
    finally:
        engine.dispose()


@pytest.fixture()
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


def _add_user(factory: sessionmaker, email: str, **fields) -> str:
    with factory() as session:
        user = User(email=email, display_name=fields.pop("display_name", email.split("@")[0]), **fields)
        session.add(user)
        session.commit()
        return user.id


@pytest.fixture()
def owner_id(session_factory: sessionmaker) -> str:
    return _add_user(
        session_factory,
        "owner@fastbooking.app",
        display_name="Jane Owner",
        phone="010-1234-5678",
        interests="Typography, hiking",
        bio="Product designer",
        location="Seoul",
        website="https://jane.example",
        occupation="Designer",
        photo_url="https://cdn.example/avatar.png",
        cover_type="image",
        cover_image="https://cdn.example/cover.png",
        attachments=[{"name": "cv.pdf", "url": "https://cdn.example/cv.pdf", "type": "application/pdf"}],
    )


@pytest.fixture()
def other_user_id(session_factory: sessionmaker) -> str:
    return _add_user(session_factory, "other@fastbooking.app")


@pytest.fixture()
def client(session_factory: sessionmaker, clock: StepClock) -> Iterator[TestClient]:
    from app.api.deps import get_clock
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        test_client.close()
        app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers():
    from app.core.security import create_access_token

    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}

    return _headers


@pytest.fixture()
def log_messages() -> Iterator[list]:
    """Everything loguru writes while the test runs, tracebacks included."""
    from app.core.logger import logger

    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
