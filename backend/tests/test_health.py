def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_openapi_document_is_served(client):
    response = client.get("/openapi/cms.yaml")

    assert response.status_code == 200
    assert b"Battery Emulation CMS API" in response.data
    response.close()


def test_unknown_api_route_is_json(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.get_json()["success"] is False
