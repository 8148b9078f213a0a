import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from portfolio.config import settings
from portfolio.database import Base, get_db
from portfolio.main import app
from portfolio.models.admin import Admin
from portfolio.services.admin_service import hash_password
from portfolio.services.media_client import MediaError, get_media_client
from portfolio.services.telegram_client import TelegramError, get_telegram_client

TEST_DB_URL = "sqlite:///./test_portfolio.db"
TEST_JWT_SECRET = "test-secret"
MEDIA_BASE = "https://res.cloudinary.com/demo/image/upload"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


class FakeMediaClient:
    def __init__(self):
        self.uploaded = []
        self.fail_upload = False

    def upload_image(self, path):
        if self.fail_upload:
            raise MediaError("upload failed")
        self.uploaded.append(path)
        return f"{MEDIA_BASE}/golang_uploads/{path.rsplit('/', 1)[-1]}"

    def build_url(self, public_id):
        if not public_id:
            return ""
        if public_id.startswith("http"):
            return public_id
        return f"{MEDIA_BASE}/{public_id}"


class FakeNotifier:
    def __init__(self):
        self.messages = []
        self.fail = False

    def send_message(self, message):
        if self.fail:
            raise TelegramError("telegram is down")
        self.messages.append(message)
        return {"ok": True}


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setattr(settings, "SHOW_SIGNUP", True)
    monkeypatch.setattr(settings, "CONTACT_DAILY_LIMIT", 2)


@pytest.fixture(autouse=True)
def media():
    fake = FakeMediaClient()
    app.dependency_overrides[get_media_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_media_client, None)


@pytest.fixture(autouse=True)
def notifier():
    fake = FakeNotifier()
    app.dependency_overrides[get_telegram_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_telegram_client, None)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_admin(db):
    admin = Admin(username="shokh", email="shokh@example.com", password_hash=hash_password("s3cret!"))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def get_token(client, login: str = "shokh", password: str = "s3cret!") -> str:
    resp = client.post("/login", json={"login": login, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


def auth_headers(client, login: str = "shokh", password: str = "s3cret!") -> dict:
    return {"Authorization": get_token(client, login, password)}


def publish(client, headers, **overrides) -> dict:
    payload = {
        "language": "en",
        "type": "blog",
        "title": "Untitled",
        "body": "Empty body",
        "meta_tag": "misc",
    }
    payload.update(overrides)
    resp = client.post("/post", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
