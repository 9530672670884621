import pytest
from emusite import create_app
from emusite.extensions import db
from emusite.application.settings import save_setting
from emusite.application.users import create_user

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secret123"


class FakeSMTP:
    """Stands in for smtplib.SMTP; every sent message lands in `outbox`."""

    outbox = []
    fail_with = None

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port

    def ehlo(self):
        pass

    def has_extn(self, name):
        return name == "starttls"

    def starttls(self):
        pass

    def login(self, username, password):
        pass

    def sendmail(self, sender, recipients, message):
        if FakeSMTP.fail_with is not None:
            raise FakeSMTP.fail_with
        FakeSMTP.outbox.append({"from": sender, "to": recipients, "message": message})

    def quit(self):
        pass


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config.update(
        UPLOAD_FOLDER=str(tmp_path / "uploads"),
        PUBLIC_FOLDER=str(tmp_path / "public"),
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    return create_user({
        "email": ADMIN_EMAIL,
        "name": "Admin",
        "password": ADMIN_PASSWORD,
        "role": "admin",
    })


@pytest.fixture
def auth_client(client, admin):
    """Test client carrying the admin's session cookie."""
    response = client.post("/api/auth/login", json={
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def login(client):
    def _login(email, password):
        return client.post("/api/auth/login", json={"email": email, "password": password})
    return _login


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.outbox = []
    FakeSMTP.fail_with = None
    monkeypatch.setattr("smtplib.SMTP", FakeSMTP)
    return FakeSMTP


@pytest.fixture
def smtp_settings(app):
    return save_setting("smtp", {
        "host": "smtp.example.com",
        "port": 587,
        "username": "mailer@example.com",
        "password": "mailpass",
        "from_email": "noreply@example.com",
    })
