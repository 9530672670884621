import pytest


def _news(**overrides):
    data = {
        "title": "Launch", "slug": "launch", "category": "Press", "status": "Published",
        "publish_date": "2025-01-10T09:00:00Z", "content": "<p>New emulator</p>",
    }
    data.update(overrides)
    return data


def test_news_ordered_by_publish_date(auth_client):
    auth_client.post("/api/news", json=_news())
    auth_client.post("/api/news", json=_news(title="Later", slug="later", publish_date="2025-03-01T00:00:00Z"))
    auth_client.post("/api/news", json=_news(title="Early", slug="early", publish_date="2024-06-01T00:00:00+02:00"))

    data = auth_client.get("/api/news").get_json()["data"]

    assert [n["slug"] for n in data] == ["later", "launch", "early"]
    assert data[1]["publish_date"].startswith("2025-01-10T09:00:00")


def test_news_requires_content(auth_client):
    response = auth_client.post("/api/news", json=_news(content=""))
    assert response.status_code == 400


@pytest.mark.parametrize("resource, extra", [
    ("solutions", {"description": "Cell to pack emulation"}),
    ("services", {"description": "Calibration", "icon": {"type": "lucide", "value": "wrench"}}),
    ("support", {}),
])
def test_content_crud(auth_client, client, resource, extra):
    payload = {
        "title": "Pack testing", "slug": "pack-testing", "category": "Automotive",
        "status": "Active", "content": "<p>Body</p>", **extra,
    }

    response = auth_client.post(f"/api/{resource}", json=payload)
    assert response.status_code == 201
    entry_id = response.get_json()["data"]["id"]

    assert auth_client.post(f"/api/{resource}", json=payload).status_code == 400

    response = auth_client.put(f"/api/{resource}/{entry_id}", json={"status": "Archived"})
    assert response.get_json()["data"]["status"] == "Archived"

    listed = client.get(f"/api/{resource}?status=Archived").get_json()
    assert listed["pagination"]["total"] == 1

    assert auth_client.delete(f"/api/{resource}/{entry_id}").status_code == 200
    assert client.get(f"/api/{resource}/{entry_id}").status_code == 404


def test_faq_ordering(auth_client, client):
    auth_client.post("/api/faq", json={"question": "Second?", "answer": "B", "order": 2})
    auth_client.post("/api/faq", json={"question": "First?", "answer": "A", "order": 1})

    data = client.get("/api/faq").get_json()["data"]
    assert [f["question"] for f in data] == ["First?", "Second?"]


def test_legal_type_slug_uniqueness(auth_client, client):
    document = {
        "title": "Privacy Policy", "slug": "privacy-policy", "type": "privacy",
        "content": "<p>Text</p>", "version": "1.0", "effective_date": "2025-01-01T00:00:00Z",
    }
    assert auth_client.post("/api/legal", json=document).status_code == 201
    assert auth_client.post("/api/legal", json=document).status_code == 400
    assert auth_client.post("/api/legal", json={**document, "type": "cookie"}).status_code == 201

    response = client.get("/api/legal?type=privacy&slug=privacy-policy")
    assert response.get_json()["data"]["version"] == "1.0"

    types = client.get("/api/legal/types").get_json()["data"]
    assert types == [{"type": "cookie", "count": 1}, {"type": "privacy", "count": 1}]


def test_downloads_featured_first(auth_client, client):
    auth_client.post("/api/downloads", json={"title": "Manual", "category": "Docs", "file_url": "/uploads/m.pdf"})
    auth_client.post("/api/downloads", json={
        "title": "Firmware", "category": "Software", "file_url": "/uploads/fw.bin", "featured": True,
    })

    data = client.get("/api/downloads").get_json()["data"]
    assert [d["title"] for d in data] == ["Firmware", "Manual"]


def test_homepage_section_defaults(auth_client, client):
    response = auth_client.post("/api/homepage", json={"name": "features", "title": "Why us"})

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["feature_title"] == "Key Features"
    assert data["map_title"] == "Remote Connectivity"

    auth_client.put(f"/api/homepage/{data['id']}", json={"status": "Inactive"})
    assert client.get("/api/homepage").get_json()["data"] == []
