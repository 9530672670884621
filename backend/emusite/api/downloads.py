from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.download import Download
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.content import normalize_download
from emusite.schemas import validate, changes
from emusite.schemas.download import DownloadCreate, DownloadUpdate
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/downloads", methods=["GET"])
def list_downloads():
    query = Download.query.filter_by(status=request.args.get("status", "Active"))

    category = request.args.get("category")
    if category and category != "all":
        query = query.filter_by(category=category)

    downloads = query.order_by(Download.featured.desc(), Download.created_at.desc()).all()
    return success([normalize_download(d) for d in downloads])


@api_bp.route("/downloads", methods=["POST"])
@jwt_required()
def create_download():
    data = validate(DownloadCreate, request.get_json(silent=True))
    download = create_entry(Download, data.model_dump(), unique_fields=())
    return success(normalize_download(download), 201)


@api_bp.route("/downloads/<download_id>", methods=["GET"])
def get_download(download_id):
    download = Download.query.filter_by(id=download_id).first_or_404(description="Download not found")
    return success(normalize_download(download))


@api_bp.route("/downloads/<download_id>", methods=["PUT"])
@jwt_required()
def update_download(download_id):
    download = Download.query.filter_by(id=download_id).first_or_404(description="Download not found")
    data = validate(DownloadUpdate, request.get_json(silent=True))
    update_entry(download, changes(data), unique_fields=())
    return success(normalize_download(download))


@api_bp.route("/downloads/<download_id>", methods=["DELETE"])
@jwt_required()
def delete_download(download_id):
    download = Download.query.filter_by(id=download_id).first_or_404(description="Download not found")
    delete_entry(download)
    return jsonify({"success": True, "message": "Download deleted"}), 200
