import smtplib
import pytest
from emusite.models.contact import ContactForm, NotificationConfig
from emusite.extensions import db

FORM = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "phone": "+44 20 0000 0000",
    "company": "Analytical Engines",
    "subject": "Quote for BE-500",
    "message": "Please send pricing.",
}


@pytest.fixture
def new_contact_config(app):
    config = NotificationConfig(
        name="Sales inbox",
        type="new_contact",
        description="New website enquiries",
        emails=["sales@example.com", "ops@example.com"],
        enabled=True,
    )
    db.session.add(config)
    db.session.commit()
    return config


def test_submission_without_smtp_is_stored(client, fake_smtp):
    response = client.post("/api/contact/form", json=FORM)

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["status"] == "new"
    assert data["notes"] is None
    assert fake_smtp.outbox == []


def test_submission_requires_every_field(client):
    response = client.post("/api/contact/form", json={**FORM, "company": "", "email": "bad"})

    assert response.status_code == 400
    fields = {e["field"] for e in response.get_json()["errors"]}
    assert fields == {"company", "email"}
    assert ContactForm.query.count() == 0


def test_submission_notifies_recipients(client, fake_smtp, smtp_settings, new_contact_config):
    response = client.post("/api/contact/form", json=FORM)

    assert response.status_code == 201
    assert len(fake_smtp.outbox) == 1
    sent = fake_smtp.outbox[0]
    assert sent["from"] == "noreply@example.com"
    assert sent["to"] == ["sales@example.com", "ops@example.com"]
    assert "Quote for BE-500" in sent["message"]


def test_failed_notification_is_written_to_notes(client, fake_smtp, smtp_settings, new_contact_config):
    fake_smtp.fail_with = smtplib.SMTPException("relay refused")

    response = client.post("/api/contact/form", json=FORM)

    assert response.status_code == 201
    form = ContactForm.query.one()
    assert form.notes == "Email notification failed: relay refused"


def test_disabled_config_skips_notification(client, fake_smtp, smtp_settings, new_contact_config):
    new_contact_config.enabled = False
    db.session.commit()

    client.post("/api/contact/form", json=FORM)
    assert fake_smtp.outbox == []


def test_list_filters(auth_client):
    auth_client.post("/api/contact/form", json=FORM)
    auth_client.post("/api/contact/form", json={**FORM, "first_name": "Grace", "email": "grace@example.com"})

    form_id = ContactForm.query.filter_by(first_name="Grace").one().id
    response = auth_client.patch(f"/api/contact/form/{form_id}", json={"status": "read", "notes": "Called back"})
    assert response.get_json()["data"]["status"] == "read"

    assert len(auth_client.get("/api/contact/form").get_json()["data"]) == 2
    assert len(auth_client.get("/api/contact/form?status=new").get_json()["data"]) == 1
    assert len(auth_client.get("/api/contact/form?search=grace").get_json()["data"]) == 1
    assert len(auth_client.get("/api/contact/form?from_date=2999-01-01").get_json()["data"]) == 0
    assert auth_client.get("/api/contact/form?to_date=not-a-date").status_code == 400


def test_list_requires_auth(client):
    assert client.get("/api/contact/form").status_code == 401


def test_notification_config_crud_and_test(auth_client, fake_smtp, smtp_settings):
    response = auth_client.post("/api/contact/notifications", json={
        "name": "Support",
        "type": "new_contact",
        "description": "Support queue",
        "emails": ["support@example.com"],
    })
    assert response.status_code == 201
    config_id = response.get_json()["data"]["id"]

    response = auth_client.post(f"/api/contact/notifications/{config_id}/test")
    assert response.status_code == 200
    assert fake_smtp.outbox[0]["to"] == ["support@example.com"]

    fake_smtp.fail_with = smtplib.SMTPException("down")
    response = auth_client.post(f"/api/contact/notifications/{config_id}/test")
    assert response.status_code == 500
    assert "down" in response.get_json()["message"]

    response = auth_client.patch(f"/api/contact/notifications/{config_id}", json={"enabled": False})
    assert response.get_json()["data"]["enabled"] is False

    assert auth_client.delete(f"/api/contact/notifications/{config_id}").status_code == 200


def test_notification_rejects_invalid_emails(auth_client):
    response = auth_client.post("/api/contact/notifications", json={
        "name": "Broken", "type": "new_contact", "description": "x", "emails": ["nope"],
    })
    assert response.status_code == 400


def test_test_notification_without_smtp(auth_client, new_contact_config):
    response = auth_client.post(f"/api/contact/notifications/{new_contact_config.id}/test")

    assert response.status_code == 400
    assert response.get_json()["message"] == "SMTP settings not found"


def test_contact_settings_upsert(auth_client, client):
    auth_client.post("/api/contact/settings", json={"type": "headquarters", "data": {"city": "Berlin"}})
    auth_client.post("/api/contact/settings", json={"type": "headquarters", "data": {"city": "Munich"}})

    data = client.get("/api/contact/settings").get_json()["data"]
    assert len(data) == 1
    assert data[0]["data"] == {"city": "Munich"}


def test_offices(auth_client, client):
    response = auth_client.post("/api/contact/offices", json={
        "name": "EMEA", "location": "Berlin", "address": "Street 1",
    })
    assert response.status_code == 201
    office_id = response.get_json()["data"]["id"]

    auth_client.patch(f"/api/contact/offices/{office_id}", json={"location": "Hamburg"})
    assert client.get("/api/contact/offices").get_json()["data"][0]["location"] == "Hamburg"

    assert auth_client.delete(f"/api/contact/offices/{office_id}").status_code == 200
