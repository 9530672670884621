import os
from flask import request, jsonify, send_file
from flask_jwt_extended import jwt_required
from emusite.models.media import MediaAsset, MediaCategory, MediaProperty
from emusite.application.content import delete_entry
from emusite.application.media import (
    create_asset,
    update_asset,
    record_download,
    create_version,
    create_property,
    create_media_category,
    update_media_category,
    archive_media_category,
)
from emusite.normalizers.media import (
    normalize_media_asset,
    normalize_media_category,
    normalize_media_version,
    normalize_media_property,
)
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.media import (
    AssetCreate,
    AssetUpdate,
    MediaCategoryCreate,
    MediaCategoryUpdate,
    VersionCreate,
    PropertyCreate,
)
from emusite.utils.filters import search_filter
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp


# ------------------------
# Assets
# ------------------------

@api_bp.route("/media/assets", methods=["GET"])
def list_assets():
    page, per_page = get_page_args(per_page_arg="limit")
    query = MediaAsset.query.filter_by(status=request.args.get("status", "Active"))

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(MediaAsset, search, "name", "description"))

    asset_type = request.args.get("type")
    if asset_type and asset_type != "all":
        query = query.filter_by(type=asset_type)

    category = request.args.get("category")
    if category and category != "all":
        query = query.filter_by(category=category)

    items, meta = paginate_offset(
        query.order_by(MediaAsset.created_at.desc()),
        page=page,
        per_page=per_page,
    )
    return jsonify(normalize_pagination(items, normalize_media_asset, meta)), 200


@api_bp.route("/media/assets", methods=["POST"])
@jwt_required()
def upload_asset():
    data = validate(AssetCreate, request.form.to_dict())
    asset = create_asset(request.files.get("file"), data.model_dump())
    return success(normalize_media_asset(asset), 201)


@api_bp.route("/media/assets/<asset_id>", methods=["GET"])
def get_asset(asset_id):
    asset = MediaAsset.query.filter_by(id=asset_id).first_or_404(description="Asset not found")
    return success(normalize_media_asset(asset))


@api_bp.route("/media/assets/<asset_id>", methods=["PUT"])
@jwt_required()
def update_asset_route(asset_id):
    asset = MediaAsset.query.filter_by(id=asset_id).first_or_404(description="Asset not found")
    data = validate(AssetUpdate, request.get_json(silent=True))
    update_asset(asset, changes(data, nullable=("sub_category",)))
    return success(normalize_media_asset(asset))


@api_bp.route("/media/download/<asset_id>", methods=["GET"])
def download_asset(asset_id):
    asset = MediaAsset.query.filter_by(id=asset_id).first_or_404(description="Asset not found")
    file_path = record_download(asset)

    download_name = asset.name
    _, ext = os.path.splitext(file_path)
    if ext and not download_name.lower().endswith(ext.lower()):
        download_name += ext

    return send_file(
        file_path,
        mimetype=asset.mime_type or "application/octet-stream",
        as_attachment=True,
        download_name=download_name,
    )


# ------------------------
# Versions & properties
# ------------------------

@api_bp.route("/media/versions", methods=["POST"])
@jwt_required()
def upload_version():
    data = validate(VersionCreate, request.form.to_dict())
    version = create_version(request.files.get("file"), data.model_dump())
    return success(normalize_media_version(version), 201)


@api_bp.route("/media/properties", methods=["POST"])
@jwt_required()
def create_property_route():
    data = validate(PropertyCreate, request.get_json(silent=True))
    prop = create_property(data.model_dump())
    return success(normalize_media_property(prop), 201)


@api_bp.route("/media/properties/<property_id>", methods=["DELETE"])
@jwt_required()
def delete_property(property_id):
    prop = MediaProperty.query.filter_by(id=property_id).first_or_404(description="Property not found")
    delete_entry(prop)
    return jsonify({"success": True, "message": "Property deleted successfully"}), 200


# ------------------------
# Categories
# ------------------------

@api_bp.route("/media/categories", methods=["GET"])
def list_media_categories():
    query = MediaCategory.query
    status = request.args.get("status", "Active")
    if status != "all":
        query = query.filter_by(status=status)

    categories = query.order_by(MediaCategory.name.asc()).all()
    return success([normalize_media_category(c) for c in categories])


@api_bp.route("/media/categories", methods=["POST"])
@jwt_required()
def create_media_category_route():
    data = validate(MediaCategoryCreate, request.get_json(silent=True))
    category = create_media_category(data.model_dump())
    return success(normalize_media_category(category), 201)


@api_bp.route("/media/categories/<category_id>", methods=["PUT"])
@jwt_required()
def update_media_category_route(category_id):
    category = MediaCategory.query.filter_by(id=category_id).first_or_404(description="Category not found")
    data = validate(MediaCategoryUpdate, request.get_json(silent=True))
    update_media_category(category, changes(data, nullable=("parent_id",)))
    return success(normalize_media_category(category))


@api_bp.route("/media/categories/<category_id>", methods=["DELETE"])
@jwt_required()
def delete_media_category(category_id):
    category = MediaCategory.query.filter_by(id=category_id).first_or_404(description="Category not found")
    archive_media_category(category)
    return success(normalize_media_category(category), message="Category archived")
