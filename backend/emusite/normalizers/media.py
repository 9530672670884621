from .common import timestamps


def normalize_media_category(category):
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        "parent_id": category.parent_id,
        "status": category.status,
        **timestamps(category),
    }


def normalize_media_version(version):
    return {
        "id": version.id,
        "asset_id": version.asset_id,
        "version": version.version,
        "changelog": version.changelog,
        "path": version.path,
        "size": version.size,
        **timestamps(version),
    }


def normalize_media_property(prop):
    return {
        "id": prop.id,
        "asset_id": prop.asset_id,
        "key": prop.key,
        "value": prop.value,
    }


def normalize_media_asset(asset, include_relations=True):
    data = {
        "id": asset.id,
        "name": asset.name,
        "description": asset.description,
        "type": asset.type,
        "category": asset.category,
        "sub_category": asset.sub_category,
        "path": asset.path,
        "size": asset.size,
        "mime_type": asset.mime_type,
        "status": asset.status,
        "tags": asset.tags or [],
        "metadata": asset.meta or {},
        "downloads": asset.downloads,
        **timestamps(asset),
    }

    if include_relations:
        data["versions"] = [normalize_media_version(v) for v in asset.versions]
        data["properties"] = [normalize_media_property(p) for p in asset.properties]
        data["usage_count"] = len(asset.usages)

    return data
