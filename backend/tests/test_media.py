import io
import os
from contextlib import contextmanager
import pytest
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import FileStorage
from emusite.application import media as media_service
from emusite.extensions import db
from emusite.models.media import MediaAsset, MediaUsage
from emusite.models.section_content import SectionContent


def _file(content=b"\x89PNG fake", name="photo.png", mimetype="image/png"):
    return (io.BytesIO(content), name, mimetype)


def _stored_path(app, url):
    return os.path.join(app.config["UPLOAD_FOLDER"], url[len("/uploads/"):])


def _stored_files(app):
    return [name for _, _, names in os.walk(app.config["UPLOAD_FOLDER"]) for name in names]


def test_image_upload(app, auth_client):
    response = auth_client.post(
        "/api/upload",
        data={"file": _file()},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["url"].startswith("/uploads/")
    assert body["url"].endswith("-photo.png")
    assert body["full_url"] == "http://testserver" + body["url"]
    assert os.path.isfile(_stored_path(app, body["url"]))


def test_image_upload_rejects_other_types(auth_client):
    response = auth_client.post(
        "/api/upload",
        data={"file": _file(b"%PDF", "doc.pdf", "application/pdf")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "file"


def test_upload_requires_file(auth_client):
    response = auth_client.post("/api/upload", data={}, content_type="multipart/form-data")
    assert response.status_code == 400


def test_upload_size_limit(app, auth_client):
    app.config["MAX_UPLOAD_SIZE"] = 4

    response = auth_client.post(
        "/api/uploads",
        data={"file": _file(b"0123456789"), "type": "image"},
        content_type="multipart/form-data",
    )
    assert response.status_code == 400


def test_video_upload_with_thumbnail(auth_client):
    response = auth_client.post(
        "/api/uploads",
        data={
            "file": _file(b"video", "intro.mp4", "video/mp4"),
            "thumbnail": _file(name="intro.png"),
            "type": "video",
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["url"].endswith("-intro.mp4")
    assert body["thumbnail"].endswith("-intro-thumb.png")


def test_video_type_must_match(auth_client):
    response = auth_client.post(
        "/api/uploads",
        data={"file": _file(), "type": "video"},
        content_type="multipart/form-data",
    )
    assert response.status_code == 400


def test_rejected_thumbnail_leaves_no_files(app, auth_client):
    response = auth_client.post(
        "/api/uploads",
        data={
            "file": _file(b"video", "clip.mp4", "video/mp4"),
            "thumbnail": _file(b"text", "thumb.txt", "text/plain"),
            "type": "video",
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert _stored_files(app) == []


def test_update_duration_patches_sections(auth_client):
    section = SectionContent(
        name="hero",
        title="Hero",
        description="",
        media={"url": "/uploads/2025/01/intro.mp4", "type": "video"},
    )
    db.session.add(section)
    db.session.commit()

    response = auth_client.post("/api/uploads/update-duration", json={
        "url": "/uploads/2025/01/intro.mp4",
        "duration": 12.5,
    })

    assert response.status_code == 200
    assert response.get_json()["updated_sections"] == 1
    assert db.session.get(SectionContent, section.id).media["duration"] == 12.5


def test_asset_upload_and_download(app, client, auth_client):
    response = auth_client.post(
        "/api/media/assets",
        data={
            "file": _file(b"%PDF-1.4", "manual.pdf", "application/pdf"),
            "name": "Manual",
            "description": "BE-500 user manual",
            "type": "document",
            "category": "Manuals",
        },
        content_type="multipart/form-data",
    )
    assert response.status_code == 201
    asset = response.get_json()["data"]
    assert asset["size"] == len(b"%PDF-1.4")
    assert asset["mime_type"] == "application/pdf"

    response = client.get(f"/api/media/download/{asset['id']}")
    assert response.status_code == 200
    assert response.data == b"%PDF-1.4"
    assert "Manual.pdf" in response.headers["Content-Disposition"]
    response.close()

    assert db.session.get(MediaAsset, asset["id"]).downloads == 1
    usage = MediaUsage.query.one()
    assert (usage.entity_type, usage.entity_id) == ("download", "anonymous")


def test_failed_insert_removes_stored_file(app, monkeypatch):
    @contextmanager
    def failing_transaction():
        yield
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(media_service, "transactional", failing_transaction)
    upload = FileStorage(io.BytesIO(b"%PDF-1.4"), filename="manual.pdf", content_type="application/pdf")

    with pytest.raises(SQLAlchemyError):
        media_service.create_asset(upload, {
            "name": "Manual", "description": "BE-500 manual", "type": "document", "category": "Manuals",
        })

    assert _stored_files(app) == []


def test_download_of_missing_file(app, client, auth_client):
    asset = MediaAsset(
        name="Ghost", description="", type="document", category="Manuals",
        path="/uploads/2025/01/ghost.pdf", size=0,
    )
    db.session.add(asset)
    db.session.commit()

    assert client.get(f"/api/media/download/{asset.id}").status_code == 404


def test_asset_metadata_update_and_properties(auth_client):
    asset = MediaAsset(
        name="Logo", description="", type="image", category="Brand",
        path="/uploads/2025/01/logo.png", size=1,
    )
    db.session.add(asset)
    db.session.commit()

    response = auth_client.put(f"/api/media/assets/{asset.id}", json={
        "tags": ["brand"], "metadata": {"width": 200},
    })
    assert response.get_json()["data"]["metadata"] == {"width": 200}

    payload = {"asset_id": asset.id, "key": "color", "value": "blue"}
    assert auth_client.post("/api/media/properties", json=payload).status_code == 201
    assert auth_client.post("/api/media/properties", json=payload).status_code == 400


def test_version_for_unknown_asset(auth_client):
    response = auth_client.post(
        "/api/media/versions",
        data={"file": _file(), "asset_id": "missing", "version": "2.0"},
        content_type="multipart/form-data",
    )
    assert response.status_code == 404


def test_media_categories(auth_client, client):
    parent = auth_client.post("/api/media/categories", json={"name": "Docs"}).get_json()["data"]
    child = auth_client.post("/api/media/categories", json={
        "name": "Manuals", "parent_id": parent["id"],
    }).get_json()["data"]

    assert auth_client.post("/api/media/categories", json={"name": "Docs"}).status_code == 400
    assert auth_client.put(
        f"/api/media/categories/{child['id']}", json={"parent_id": child["id"]}
    ).status_code == 400

    # Parent still has an active child
    assert auth_client.delete(f"/api/media/categories/{parent['id']}").status_code == 400

    assert auth_client.delete(f"/api/media/categories/{child['id']}").status_code == 200
    assert auth_client.delete(f"/api/media/categories/{parent['id']}").status_code == 200
    assert client.get("/api/media/categories").get_json()["data"] == []
