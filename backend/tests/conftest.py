# ruff: noqa: INP001
"""Pytest configuration shared across backend tests."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read at import time; pin deterministic values regardless of shell env.
os.environ["JWT_SECRET"] = "test-jwt-secret-0123456789-0123456789-0123456789x"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATA_FILE"] = str(Path(tempfile.gettempdir()) / "taskboard-tests" / "db.json")
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from taskboard.db.store import JsonDatastore, get_datastore  # noqa: E402
from taskboard.main import create_app  # noqa: E402


@pytest.fixture
def store(tmp_path: Path) -> JsonDatastore:
    return JsonDatastore(tmp_path / "db.json")


@pytest.fixture
def app(store: JsonDatastore):
    fastapi_app = create_app()
    fastapi_app.dependency_overrides[get_datastore] = lambda: store
    return fastapi_app


@pytest.fixture
def client(app) -> TestClient:
    # Session cookies are marked Secure, so talk to the app over https.
    return TestClient(app, base_url="https://testserver")
