import os
from typing import Any, Dict, Optional
from flask import current_app
from werkzeug.exceptions import NotFound
from emusite.extensions import db
from emusite.models.media import MediaAsset, MediaCategory, MediaVersion, MediaUsage, MediaProperty
from emusite.models.section_content import SectionContent
from emusite.domain.exceptions import InvariantViolation
from emusite.utils.media import delete_file, save_file, validate_upload, upload_path
from emusite.utils.transaction import transactional


# ------------------------
# Assets
# ------------------------

def _persist_upload(row, stored: Dict[str, Any]) -> None:
    """Insert `row`; the file already written for it is removed if that fails."""
    try:
        with transactional():
            db.session.add(row)
    except Exception:
        delete_file(stored["path"])
        raise


def create_asset(file, data: Dict[str, Any]) -> MediaAsset:
    validate_upload(file)
    stored = save_file(file)

    asset = MediaAsset(
        name=data["name"],
        description=data["description"],
        type=data["type"],
        category=data["category"],
        sub_category=data.get("sub_category"),
        path=stored["path"],
        size=stored["size"],
        mime_type=stored["mime_type"],
        status="Active",
        tags=[],
        meta={},
    )

    _persist_upload(asset, stored)

    return asset


def update_asset(asset: MediaAsset, data: Dict[str, Any]) -> MediaAsset:
    data = dict(data)
    if "metadata" in data:
        data["meta"] = data.pop("metadata")

    with transactional():
        for field, value in data.items():
            setattr(asset, field, value)

    return asset


def record_download(asset: MediaAsset) -> str:
    """
    Count the download, log an anonymous usage row and return the
    filesystem path of the stored file.
    """
    file_path = upload_path(asset.path)
    if not file_path or not os.path.isfile(file_path):
        current_app.logger.error("Media file missing for asset %s: %s", asset.id, asset.path)
        raise NotFound("File not found")

    with transactional():
        asset.downloads = (asset.downloads or 0) + 1
        db.session.add(MediaUsage(
            asset_id=asset.id,
            entity_type="download",
            entity_id="anonymous",
        ))

    return file_path


# ------------------------
# Versions & properties
# ------------------------

def _get_asset(asset_id: str) -> MediaAsset:
    asset = db.session.get(MediaAsset, asset_id)
    if asset is None:
        raise NotFound("Asset not found")
    return asset


def create_version(file, data: Dict[str, Any]) -> MediaVersion:
    asset = _get_asset(data["asset_id"])
    validate_upload(file)
    stored = save_file(file)

    version = MediaVersion(
        asset_id=asset.id,
        version=data["version"],
        changelog=data.get("changelog"),
        path=stored["path"],
        size=stored["size"],
    )

    _persist_upload(version, stored)

    return version


def create_property(data: Dict[str, Any]) -> MediaProperty:
    asset = _get_asset(data["asset_id"])

    if MediaProperty.query.filter_by(asset_id=asset.id, key=data["key"]).first():
        raise InvariantViolation("Property key already exists for this asset", field="key")

    prop = MediaProperty(asset_id=asset.id, key=data["key"], value=data["value"])
    with transactional():
        db.session.add(prop)

    return prop


# ------------------------
# Categories
# ------------------------

def _ensure_unique_name(name: str, exclude_id: Optional[str] = None) -> None:
    query = MediaCategory.query.filter_by(name=name, status="Active")
    if exclude_id:
        query = query.filter(MediaCategory.id != exclude_id)
    if query.first():
        raise InvariantViolation("Category name already exists", field="name")


def _ensure_parent(parent_id: Optional[str], category_id: Optional[str] = None) -> None:
    if not parent_id:
        return
    if parent_id == category_id:
        raise InvariantViolation("Category cannot be its own parent", field="parent_id")
    if db.session.get(MediaCategory, parent_id) is None:
        raise InvariantViolation("Parent category not found", field="parent_id")


def create_media_category(data: Dict[str, Any]) -> MediaCategory:
    _ensure_unique_name(data["name"])
    _ensure_parent(data.get("parent_id"))

    category = MediaCategory(
        name=data["name"],
        description=data.get("description"),
        parent_id=data.get("parent_id") or None,
        status="Active",
    )
    with transactional():
        db.session.add(category)

    return category


def update_media_category(category: MediaCategory, data: Dict[str, Any]) -> MediaCategory:
    if data.get("name") and data["name"] != category.name:
        _ensure_unique_name(data["name"], exclude_id=category.id)
    if "parent_id" in data:
        _ensure_parent(data["parent_id"], category.id)
        data = {**data, "parent_id": data["parent_id"] or None}

    with transactional():
        for field, value in data.items():
            setattr(category, field, value)

    return category


def archive_media_category(category: MediaCategory) -> MediaCategory:
    """Soft delete; refused while active children or active assets remain."""
    if MediaCategory.query.filter_by(parent_id=category.id, status="Active").count():
        raise InvariantViolation("Cannot delete category with active subcategories")

    if MediaAsset.query.filter_by(category=category.name, status="Active").count():
        raise InvariantViolation("Cannot delete category with active assets")

    with transactional():
        category.status = "Archived"

    return category


# ------------------------
# Section media
# ------------------------

def update_media_duration(url: str, duration: float) -> int:
    """
    Set `duration` on every media entry equal to `url` across homepage
    sections. Returns the number of sections touched.
    """
    touched = 0

    with transactional():
        for section in SectionContent.query.filter(SectionContent.media.isnot(None)).all():
            media = section.media
            if isinstance(media, list):
                updated = [
                    {**item, "duration": duration} if isinstance(item, dict) and item.get("url") == url else item
                    for item in media
                ]
            elif isinstance(media, dict) and media.get("url") == url:
                updated = {**media, "duration": duration}
            else:
                continue

            if updated != media:
                section.media = updated
                touched += 1

    return touched
