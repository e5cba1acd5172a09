# tests/conftest.py

"""Shared fixtures: an isolated database and upload directory per test."""

import io
import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Configure the app through the environment before anything imports it
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="catalog-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{(_TMP_ROOT / 'catalog.db').as_posix()}"
os.environ["UPLOAD_DIR"] = str(_TMP_ROOT / "uploads")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("LOG_FILE", None)
os.environ.pop("FRONTEND_DIR", None)

from fastapi.testclient import TestClient  # noqa: E402

from config import settings  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402


def _reset_state() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    for child in upload_dir.iterdir():
        if child.is_dir():
            shutil.rmtree(child)
        else:
            child.unlink()


@pytest.fixture
def upload_dir() -> Path:
    return Path(settings.UPLOAD_DIR)


@pytest.fixture
def client():
    from main import app

    _reset_state()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    _reset_state()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def image_part(name: str = "pencil.png", content: bytes = b"\x89PNG fake image bytes"):
    """Multipart ``files=`` argument carrying one product image."""
    return {"image": (name, io.BytesIO(content), "image/png")}


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_TMP_ROOT, ignore_errors=True)
