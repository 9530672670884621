import pytest


@pytest.fixture
def category(auth_client):
    return auth_client.post("/api/categories", json={"name": "Emulators"}).get_json()["data"]


def _product(category_id, **overrides):
    data = {
        "name": "BE-500",
        "slug": "be-500",
        "category_id": category_id,
        "status": "Active",
        "description": "Regenerative battery emulator",
        "images": ["/uploads/2025/01/be-500.png"],
        "files": [{"name": "Datasheet", "url": "/uploads/2025/01/be-500.pdf", "size": 1024}],
    }
    data.update(overrides)
    return data


def test_create_product_makes_media_urls_absolute(auth_client, category):
    response = auth_client.post("/api/products", json=_product(category["id"]))

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["images"] == ["http://testserver/uploads/2025/01/be-500.png"]
    assert data["files"][0]["url"] == "http://testserver/uploads/2025/01/be-500.pdf"
    assert data["category"]["slug"] == "emulators"


def test_unknown_category_is_rejected(auth_client):
    response = auth_client.post("/api/products", json=_product("missing"))

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "category_id"


def test_duplicate_slug_is_rejected(auth_client, category):
    auth_client.post("/api/products", json=_product(category["id"]))
    response = auth_client.post("/api/products", json=_product(category["id"], name="Copy"))

    assert response.status_code == 400


def test_get_by_id_or_slug(auth_client, category):
    product_id = auth_client.post("/api/products", json=_product(category["id"])).get_json()["data"]["id"]

    assert auth_client.get(f"/api/products/{product_id}").get_json()["data"]["slug"] == "be-500"
    assert auth_client.get("/api/products/be-500").get_json()["data"]["id"] == product_id
    assert auth_client.get("/api/products/nope").status_code == 404


def test_category_filter_includes_descendants(auth_client, category):
    child = auth_client.post("/api/categories", json={
        "name": "Modules", "parent_id": category["id"],
    }).get_json()["data"]
    other = auth_client.post("/api/categories", json={"name": "Chargers"}).get_json()["data"]

    auth_client.post("/api/products", json=_product(category["id"]))
    auth_client.post("/api/products", json=_product(child["id"], name="M-1", slug="m-1"))
    auth_client.post("/api/products", json=_product(other["id"], name="C-1", slug="c-1"))

    response = auth_client.get(f"/api/products?category={category['id']}")
    slugs = sorted(p["slug"] for p in response.get_json()["data"])

    assert slugs == ["be-500", "m-1"]


def test_delete_discontinues_unless_hard(auth_client, category):
    auth_client.post("/api/products", json=_product(category["id"]))

    response = auth_client.delete("/api/products/be-500")
    assert response.status_code == 200
    assert response.get_json()["data"]["status"] == "Discontinued"

    response = auth_client.delete("/api/products/be-500?hard=true")
    assert response.status_code == 200
    assert auth_client.get("/api/products/be-500").status_code == 404


def test_update_product(auth_client, category):
    auth_client.post("/api/products", json=_product(category["id"]))

    response = auth_client.put("/api/products/be-500", json={"status": "Coming Soon", "models": "BE-500\nBE-1000"})

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["status"] == "Coming Soon"
    assert data["models"] == "BE-500\nBE-1000"
