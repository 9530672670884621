import os
import smtplib
from emusite.application.users import create_user
from emusite.extensions import db
from emusite.models.page import Page
from emusite.models.seo import KeywordRanking, CompetitorAnalysis

SMTP = {
    "host": "smtp.example.com",
    "port": 587,
    "username": "mailer@example.com",
    "password": "mailpass",
}


def test_settings_are_admin_only(client, login):
    create_user({"email": "editor@example.com", "name": "Ed", "password": "secret123", "role": "editor"})
    login("editor@example.com", "secret123")

    response = client.get("/api/settings/website")

    assert response.status_code == 403
    assert response.get_json() == {"success": False, "message": "Insufficient permissions"}


def test_website_settings_defaults_and_save(auth_client):
    data = auth_client.get("/api/settings/website").get_json()["data"]
    assert data == {"site_name": "", "site_description": "", "logo": "", "favicon": ""}

    assert auth_client.post("/api/settings/website", json={"site_name": ""}).status_code == 400

    response = auth_client.post("/api/settings/website", json={"site_name": "Emu Systems"})
    assert response.status_code == 200
    assert auth_client.get("/api/settings/website").get_json()["data"]["site_name"] == "Emu Systems"


def test_smtp_save_hides_password_and_check(auth_client):
    assert auth_client.get("/api/settings/smtp/check").get_json()["data"]["configured"] is False

    assert auth_client.post("/api/settings/smtp", json=SMTP).status_code == 200

    stored = auth_client.get("/api/settings/smtp").get_json()["data"]
    assert stored["host"] == "smtp.example.com"
    assert "password" not in stored

    status = auth_client.get("/api/settings/smtp/check").get_json()["data"]
    assert status == {"configured": True, "message": "SMTP is configured"}


def test_smtp_test_action_does_not_save(auth_client, fake_smtp):
    response = auth_client.post("/api/settings/smtp", json={
        **SMTP, "action": "test", "test_email": "me@example.com",
    })

    assert response.status_code == 200
    assert fake_smtp.outbox[0]["to"] == ["me@example.com"]
    assert auth_client.get("/api/settings/smtp").get_json()["data"] == {}


def test_smtp_test_action_reports_failure(auth_client, fake_smtp):
    fake_smtp.fail_with = smtplib.SMTPAuthenticationError(535, b"bad credentials")

    response = auth_client.post("/api/settings/smtp", json={
        **SMTP, "action": "test", "test_email": "me@example.com",
    })

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_seo_settings_created_on_read(auth_client):
    data = auth_client.get("/api/settings/seo").get_json()["data"]
    assert data["robots_txt"] is None

    response = auth_client.put("/api/settings/seo", json={"keywords": "battery emulator"})
    assert response.get_json()["data"]["keywords"] == "battery emulator"


def test_generate_sitemap_writes_file(app, auth_client):
    db.session.add(Page(title="About", slug="about", status="Published"))
    db.session.add(Page(title="Secret", slug="secret", status="Draft"))
    db.session.commit()

    assert auth_client.post("/api/settings/generate-sitemap").status_code == 200

    path = os.path.join(app.config["PUBLIC_FOLDER"], "sitemap.xml")
    with open(path, encoding="utf-8") as fh:
        xml = fh.read()

    assert "<loc>http://testserver/about</loc>" in xml
    assert "secret" not in xml


def test_generate_robots(auth_client, client):
    response = auth_client.post("/api/settings/generate-robots")

    robots = response.get_json()["data"]["robots_txt"]
    assert "Disallow: /admin" in robots
    assert "Sitemap: http://testserver/sitemap.xml" in robots
    assert client.get("/robots.txt").get_data(as_text=True) == robots


def test_seo_insights(auth_client):
    for i in range(12):
        db.session.add(KeywordRanking(keyword=f"kw-{i}", position=12 - i))
    for i in range(6):
        db.session.add(CompetitorAnalysis(competitor=f"c-{i}", score=i * 10))
    db.session.commit()

    keywords = auth_client.get("/api/seo/keywords").get_json()["data"]
    assert len(keywords) == 10
    assert keywords[0]["position"] == 1

    competitors = auth_client.get("/api/seo/competitors").get_json()["data"]
    assert [c["score"] for c in competitors] == [50, 40, 30, 20, 10]


def test_social_media_ordering(auth_client, client):
    auth_client.post("/api/social-media", json={"platform": "YouTube", "url": "https://youtube.com/x", "display_order": 2})
    auth_client.post("/api/social-media", json={"platform": "LinkedIn", "url": "https://linkedin.com/x", "display_order": 1})

    data = client.get("/api/social-media").get_json()["data"]
    assert [link["platform"] for link in data] == ["LinkedIn", "YouTube"]
