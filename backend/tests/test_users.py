from emusite.application.users import create_user
from emusite.models.user import User


def _user(**overrides):
    data = {"email": "editor@example.com", "name": "Editor", "password": "secret123", "role": "editor"}
    data.update(overrides)
    return data


def test_create_user_hashes_password(auth_client):
    response = auth_client.post("/api/users", json=_user(email="Editor@Example.com"))

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["email"] == "editor@example.com"
    assert "password" not in data

    user = User.query.filter_by(email="editor@example.com").one()
    assert user.password_hash != "secret123"
    assert user.check_password("secret123")


def test_duplicate_email(auth_client):
    auth_client.post("/api/users", json=_user())
    response = auth_client.post("/api/users", json=_user(name="Other"))

    assert response.status_code == 400
    assert response.get_json()["message"] == "Email already exists"


def test_last_admin_cannot_be_deleted_or_demoted(auth_client, admin):
    response = auth_client.delete(f"/api/users/{admin.id}")
    assert response.status_code == 400

    response = auth_client.put(f"/api/users/{admin.id}", json={"role": "editor"})
    assert response.status_code == 400
    assert User.query.filter_by(role="admin").count() == 1


def test_last_active_admin_cannot_be_deactivated(auth_client, admin):
    create_user(_user(email="old-admin@example.com", role="admin", status="inactive"))

    response = auth_client.put(f"/api/users/{admin.id}", json={"status": "inactive"})
    assert response.status_code == 400
    assert response.get_json()["message"] == "Cannot deactivate the last admin"

    assert auth_client.delete(f"/api/users/{admin.id}").status_code == 400
    assert User.query.filter_by(role="admin", status="active").count() == 1


def test_admin_can_be_deactivated_while_another_is_active(auth_client, admin):
    other = create_user(_user(email="second@example.com", role="admin"))

    response = auth_client.put(f"/api/users/{other.id}", json={"status": "inactive"})

    assert response.status_code == 200
    assert response.get_json()["data"]["status"] == "inactive"


def test_demoted_admin_loses_access_immediately(app, auth_client):
    create_user(_user(email="second@example.com", role="admin"))
    other_client = app.test_client()
    response = other_client.post("/api/auth/login", json={"email": "second@example.com", "password": "secret123"})
    assert response.status_code == 200
    assert other_client.get("/api/users").status_code == 200

    other = User.query.filter_by(email="second@example.com").one()
    assert auth_client.put(f"/api/users/{other.id}", json={"role": "editor"}).status_code == 200

    assert other_client.get("/api/users").status_code == 403


def test_update_and_delete_user(auth_client):
    user_id = auth_client.post("/api/users", json=_user()).get_json()["data"]["id"]

    response = auth_client.put(f"/api/users/{user_id}", json={"status": "inactive", "name": "Ed"})
    assert response.get_json()["data"]["status"] == "inactive"
    assert response.get_json()["data"]["name"] == "Ed"

    assert auth_client.delete(f"/api/users/{user_id}").status_code == 200
    assert auth_client.get(f"/api/users/{user_id}").status_code == 404


def test_users_require_admin(client, login):
    create_user(_user())
    login("editor@example.com", "secret123")

    assert client.get("/api/users").status_code == 403
