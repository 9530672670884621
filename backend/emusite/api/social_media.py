from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.social_media import SocialMedia
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.site import normalize_social_media
from emusite.schemas import validate, changes
from emusite.schemas.social_media import SocialMediaCreate, SocialMediaUpdate
from emusite.utils.filters import arg_flag
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/social-media", methods=["GET"])
def list_social_media():
    query = SocialMedia.query
    if arg_flag(request.args, "active"):
        query = query.filter_by(is_active=True)

    links = query.order_by(SocialMedia.display_order.asc(), SocialMedia.created_at.asc()).all()
    return success([normalize_social_media(link) for link in links])


@api_bp.route("/social-media", methods=["POST"])
@jwt_required()
def create_social_media():
    data = validate(SocialMediaCreate, request.get_json(silent=True))
    link = create_entry(SocialMedia, data.model_dump(), unique_fields=())
    return success(normalize_social_media(link), 201)


@api_bp.route("/social-media/<link_id>", methods=["GET"])
def get_social_media(link_id):
    link = SocialMedia.query.filter_by(id=link_id).first_or_404(description="Social media link not found")
    return success(normalize_social_media(link))


@api_bp.route("/social-media/<link_id>", methods=["PUT"])
@jwt_required()
def update_social_media(link_id):
    link = SocialMedia.query.filter_by(id=link_id).first_or_404(description="Social media link not found")
    data = validate(SocialMediaUpdate, request.get_json(silent=True))
    update_entry(link, changes(data, nullable=("icon", "qr_code")), unique_fields=())
    return success(normalize_social_media(link))


@api_bp.route("/social-media/<link_id>", methods=["DELETE"])
@jwt_required()
def delete_social_media(link_id):
    link = SocialMedia.query.filter_by(id=link_id).first_or_404(description="Social media link not found")
    delete_entry(link)
    return jsonify({"success": True}), 200
