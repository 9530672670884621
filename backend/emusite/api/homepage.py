from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.section_content import (
    SectionContent,
    DEFAULT_FEATURE_TITLE,
    DEFAULT_FEATURE_SUBTITLE,
    DEFAULT_MAP_TITLE,
    DEFAULT_MAP_SUBTITLE,
)
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.content import normalize_section
from emusite.schemas import validate, changes
from emusite.schemas.section_content import SectionCreate, SectionUpdate
from emusite.utils.responses import success
from . import api_bp

SECTION_DEFAULTS = {
    "feature_title": DEFAULT_FEATURE_TITLE,
    "feature_subtitle": DEFAULT_FEATURE_SUBTITLE,
    "map_title": DEFAULT_MAP_TITLE,
    "map_subtitle": DEFAULT_MAP_SUBTITLE,
}


@api_bp.route("/homepage", methods=["GET"])
def list_sections():
    sections = (
        SectionContent.query
        .filter_by(status="Active")
        .order_by(SectionContent.updated_at.desc())
        .all()
    )
    return success([normalize_section(s) for s in sections])


@api_bp.route("/homepage", methods=["POST"])
@jwt_required()
def create_section():
    data = validate(SectionCreate, request.get_json(silent=True)).model_dump()
    for field, default in SECTION_DEFAULTS.items():
        data[field] = data.get(field) or default

    section = create_entry(SectionContent, data, unique_fields=())
    return success(normalize_section(section), 201)


@api_bp.route("/homepage/<section_id>", methods=["GET"])
def get_section(section_id):
    section = SectionContent.query.filter_by(id=section_id).first_or_404(description="Section not found")
    return success(normalize_section(section))


@api_bp.route("/homepage/<section_id>", methods=["PUT"])
@jwt_required()
def update_section(section_id):
    section = SectionContent.query.filter_by(id=section_id).first_or_404(description="Section not found")
    data = validate(SectionUpdate, request.get_json(silent=True))
    update_entry(section, changes(data, nullable=("badge", "media", "thumbnail")), unique_fields=())
    return success(normalize_section(section))


@api_bp.route("/homepage/<section_id>", methods=["DELETE"])
@jwt_required()
def delete_section(section_id):
    section = SectionContent.query.filter_by(id=section_id).first_or_404(description="Section not found")
    delete_entry(section)
    return jsonify({"success": True, "message": "Section deleted"}), 200
