from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.application.media import update_media_duration
from emusite.domain.exceptions import InvariantViolation
from emusite.schemas import validate
from emusite.schemas.media import DurationUpdate
from emusite.utils.media import (
    ALLOWED_IMAGE_TYPES,
    ALLOWED_VIDEO_TYPES,
    absolute_url,
    save_file,
    validate_upload,
)
from . import api_bp


@api_bp.route("/upload", methods=["POST"])
@jwt_required()
def upload_image():
    """Single image upload used by rich-text and cover image fields."""
    file = request.files.get("file")
    validate_upload(file, image_only=True)
    stored = save_file(file)

    return jsonify({
        "success": True,
        "url": stored["path"],
        "full_url": absolute_url(stored["path"]),
    }), 200


@api_bp.route("/uploads", methods=["POST"])
@jwt_required()
def upload_media():
    """
    Homepage media upload: type=image|video, with an optional
    thumbnail image for videos.
    """
    file = request.files.get("file")
    upload_type = request.form.get("type")

    if upload_type not in ("image", "video"):
        raise InvariantViolation("type must be 'image' or 'video'", field="type")

    allowed = ALLOWED_IMAGE_TYPES if upload_type == "image" else ALLOWED_VIDEO_TYPES
    validate_upload(file, allowed_types=allowed)

    thumbnail = request.files.get("thumbnail")
    with_thumbnail = upload_type == "video" and thumbnail is not None and bool(thumbnail.filename)
    if with_thumbnail:
        validate_upload(thumbnail, allowed_types=ALLOWED_IMAGE_TYPES)

    # Nothing is written until every file has passed validation
    stored = save_file(file)
    thumbnail_url = save_file(thumbnail, suffix="thumb")["path"] if with_thumbnail else None

    return jsonify({
        "success": True,
        "url": stored["path"],
        "type": upload_type,
        "thumbnail": thumbnail_url,
    }), 200


@api_bp.route("/uploads/update-duration", methods=["POST"])
@jwt_required()
def update_duration():
    data = validate(DurationUpdate, request.get_json(silent=True))
    touched = update_media_duration(data.url, data.duration)

    return jsonify({
        "success": True,
        "duration": data.duration,
        "updated_sections": touched,
    }), 200
