from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from farmhub.api.deps import get_mailer
from farmhub.core.config import Settings
from farmhub.core.errors import RelayError
from farmhub.factory import create_app
from farmhub.models.user import UserRole
from farmhub.services.user_service import create_user

ADMIN_EMAIL = "admin@farmhub.org"
USER_EMAIL = "farmer@farmhub.org"
PASSWORD = "s3cret-pass"

MEMBER_FORM = {
    "surname": "Adeyemi",
    "otherNames": "Tunde Bola",
    "dateOfBirth": "1985-04-12",
    "gender": "Male",
    "occupation": "Farmer",
    "qualification": "OND",
    "localGovernmentOfOrigin": "Ikeja",
    "residentialAddress": "12 Farm Road, Ikeja",
    "phone": "08031234567",
    "nextOfKin": "Funke Adeyemi",
    "enrollmentStatus": "Direct Farmer",
    "dateEnrollment": "2024-01-15",
    "shortFarmHistory": "Cassava and maize since 2010",
    "cropVariety": "Cassava",
    "farmingExperience": "12 years",
    "irrigationMethod": "Rainfed",
    "location": "Ikorodu",
    "farmSize": "5 acres",
    "contact": "tunde@mail.com",
}


class MailerStub:
    """Records relayed messages; flip ``fail`` to simulate an SMTP outage."""

    def __init__(self):
        self.fail = False
        self.sent: list[dict] = []

    async def send(self, *, sender, to, subject, body):
        if self.fail:
            raise RelayError("SMTP connection refused")
        self.sent.append({"sender": sender, "to": to, "subject": subject, "body": body})


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        EMAIL_USER="noreply@farmhub.org",
        ADMIN_EMAIL="office@farmhub.org",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def upload_dir(settings) -> Path:
    return Path(settings.UPLOAD_DIR)


@pytest.fixture
def mailer() -> MailerStub:
    return MailerStub()


@pytest.fixture
def app(settings, mailer):
    app = create_app(settings)
    app.dependency_overrides[get_mailer] = lambda: mailer
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient on an isolated in-memory database; startup creates the tables."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session_factory(app):
    return app.state.session_factory


def login_headers(client: TestClient, email: str, password: str = PASSWORD) -> dict[str, str]:
    resp = client.post("/api/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.json()
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def admin_headers(client, session_factory) -> dict[str, str]:
    with session_factory() as db:
        create_user(db, email=ADMIN_EMAIL, password=PASSWORD, role=UserRole.ADMIN)
    return login_headers(client, ADMIN_EMAIL)


@pytest.fixture
def user_headers(client, session_factory) -> dict[str, str]:
    with session_factory() as db:
        create_user(db, email=USER_EMAIL, password=PASSWORD)
    return login_headers(client, USER_EMAIL)


def stored_files(upload_dir: Path) -> list[Path]:
    if not upload_dir.exists():
        return []
    return sorted(p for p in upload_dir.iterdir() if p.is_file())
