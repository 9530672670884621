from datetime import timedelta
from emusite.extensions import db
from emusite.models.page import Page


def _page(**overrides):
    data = {"title": "About", "slug": "about", "status": "Published", "content": "<p>Hi</p>"}
    data.update(overrides)
    return data


def test_create_page(auth_client):
    response = auth_client.post("/api/pages", json=_page(hero={"title": "Welcome"}))

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["slug"] == "about"
    assert data["status"] == "Published"
    assert data["hero"] == {"title": "Welcome"}


def test_create_page_requires_auth(client):
    response = client.post("/api/pages", json=_page())
    assert response.status_code == 401


def test_create_page_rejects_bad_slug(auth_client):
    response = auth_client.post("/api/pages", json=_page(slug="Not A Slug"))

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "slug"


def test_duplicate_slug_is_rejected(auth_client):
    auth_client.post("/api/pages", json=_page())
    response = auth_client.post("/api/pages", json=_page(title="Other"))

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_update_keeps_own_slug(auth_client):
    page_id = auth_client.post("/api/pages", json=_page()).get_json()["data"]["id"]

    response = auth_client.put(f"/api/pages/{page_id}", json={"slug": "about", "title": "About us"})

    assert response.status_code == 200
    assert response.get_json()["data"]["title"] == "About us"


def test_update_rejects_slug_of_another_page(auth_client):
    auth_client.post("/api/pages", json=_page())
    other_id = auth_client.post("/api/pages", json=_page(slug="team")).get_json()["data"]["id"]

    response = auth_client.put(f"/api/pages/{other_id}", json={"slug": "about"})
    assert response.status_code == 400


def test_stale_update_conflicts(auth_client):
    page_id = auth_client.post("/api/pages", json=_page()).get_json()["data"]["id"]
    page = db.session.get(Page, page_id)

    stale = (page.updated_at - timedelta(minutes=5)).strftime("%a, %d %b %Y %H:%M:%S GMT")
    response = auth_client.put(
        f"/api/pages/{page_id}",
        json={"title": "Changed"},
        headers={"If-Unmodified-Since": stale},
    )

    assert response.status_code == 409


def test_list_pages_paginates_and_filters(auth_client):
    for i in range(3):
        auth_client.post("/api/pages", json=_page(title=f"Page {i}", slug=f"page-{i}"))
    auth_client.post("/api/pages", json=_page(title="Draft", slug="draft", status="Draft"))

    response = auth_client.get("/api/pages?per_page=2&status=Published")
    body = response.get_json()

    assert response.status_code == 200
    assert len(body["data"]) == 2
    assert body["pagination"] == {"page": 1, "per_page": 2, "total": 3, "total_pages": 2}


def test_search_pages(auth_client):
    auth_client.post("/api/pages", json=_page(title="Battery cyclers", slug="cyclers"))
    auth_client.post("/api/pages", json=_page(title="Careers", slug="careers"))

    response = auth_client.get("/api/pages?search=cycler")
    assert [p["slug"] for p in response.get_json()["data"]] == ["cyclers"]


def test_get_missing_page(client):
    response = client.get("/api/pages/missing")

    assert response.status_code == 404
    assert response.get_json() == {"success": False, "message": "Page not found"}


def test_delete_page(auth_client):
    page_id = auth_client.post("/api/pages", json=_page()).get_json()["data"]["id"]

    assert auth_client.delete(f"/api/pages/{page_id}").status_code == 200
    assert auth_client.get(f"/api/pages/{page_id}").status_code == 404
