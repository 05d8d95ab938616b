import os
import tempfile
from pathlib import Path

# must be set before app.config is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="auth-backend-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "development"
os.environ["CLIENT_URL"] = "http://localhost:5173/"
os.environ["LOG_DIR"] = str(_TMP_DIR / "logs")
os.environ["SENDER_EMAIL"] = ""
os.environ["SENDER_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app
from app.services.notifications import get_notifier


class RecordingNotifier:
    """Collects outgoing emails instead of talking to SMTP."""

    def __init__(self):
        self.sent = []

    def send_verification_email(self, email, verification_code):
        self.sent.append(("verification", email, verification_code))
        return True

    def send_welcome_email(self, email, name):
        self.sent.append(("welcome", email, name))
        return True

    def send_password_reset_email(self, email, reset_url):
        self.sent.append(("password-reset", email, reset_url))
        return True

    def send_reset_success_email(self, email):
        self.sent.append(("reset-success", email, None))
        return True

    def of_kind(self, kind):
        return [item for item in self.sent if item[0] == kind]


@pytest.fixture(autouse=True)
def clean_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def notifier():
    recorder = RecordingNotifier()
    app.dependency_overrides[get_notifier] = lambda: recorder
    yield recorder
    app.dependency_overrides.pop(get_notifier, None)


@pytest.fixture
def client(notifier):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def signup(client):
    def _signup(email="ada@example.com", password="s3cret-pass", name="Ada"):
        return client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})
    return _signup
