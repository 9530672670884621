from flask import request, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy import func
from emusite.extensions import db
from emusite.models.base import as_naive_utc
from emusite.models.legal import LegalDocument
from emusite.application.content import ensure_unique, create_entry, update_entry, delete_entry
from emusite.normalizers.content import normalize_legal
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.legal import LegalCreate, LegalUpdate
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp

DUPLICATE_MESSAGE = "A document with this slug already exists for this type"


@api_bp.route("/legal", methods=["GET"])
def list_legal():
    """
    ?id=...            -> single document
    ?type=...&slug=... -> single document
    otherwise          -> paginated list filtered by type/slug/status
    """
    document_id = request.args.get("id")
    doc_type = request.args.get("type")
    slug = request.args.get("slug")
    status = request.args.get("status")

    if document_id:
        document = LegalDocument.query.filter_by(id=document_id).first_or_404(description="Document not found")
        return success(normalize_legal(document))

    if doc_type and slug:
        document = LegalDocument.query.filter_by(type=doc_type, slug=slug).first_or_404(description="Document not found")
        return success(normalize_legal(document))

    query = LegalDocument.query
    if doc_type:
        query = query.filter_by(type=doc_type)
    if slug:
        query = query.filter_by(slug=slug)
    if status:
        query = query.filter_by(status=status)

    page, per_page = get_page_args(per_page_arg="limit")
    items, meta = paginate_offset(
        query.order_by(LegalDocument.updated_at.desc()),
        page=page,
        per_page=per_page,
    )
    return jsonify(normalize_pagination(items, normalize_legal, meta)), 200


@api_bp.route("/legal/types", methods=["GET"])
def legal_types():
    rows = (
        db.session.query(LegalDocument.type, func.count(LegalDocument.id))
        .group_by(LegalDocument.type)
        .order_by(LegalDocument.type.asc())
        .all()
    )
    return success([{"type": doc_type, "count": count} for doc_type, count in rows])


@api_bp.route("/legal", methods=["POST"])
@jwt_required()
def create_legal():
    data = validate(LegalCreate, request.get_json(silent=True)).model_dump()
    data["effective_date"] = as_naive_utc(data["effective_date"])

    ensure_unique(LegalDocument, "slug", data["slug"], type=data["type"], message=DUPLICATE_MESSAGE)
    document = create_entry(LegalDocument, data, unique_fields=())
    return success(normalize_legal(document), 201)


@api_bp.route("/legal/<document_id>", methods=["PATCH"])
@jwt_required()
def update_legal(document_id):
    document = LegalDocument.query.filter_by(id=document_id).first_or_404(description="Document not found")
    data = changes(validate(LegalUpdate, request.get_json(silent=True)))
    if "effective_date" in data:
        data["effective_date"] = as_naive_utc(data["effective_date"])

    slug = data.get("slug", document.slug)
    doc_type = data.get("type", document.type)
    if (slug, doc_type) != (document.slug, document.type):
        ensure_unique(LegalDocument, "slug", slug, exclude_id=document.id, type=doc_type, message=DUPLICATE_MESSAGE)

    update_entry(document, data, unique_fields=())
    return success(normalize_legal(document))


@api_bp.route("/legal/<document_id>", methods=["DELETE"])
@jwt_required()
def delete_legal(document_id):
    document = LegalDocument.query.filter_by(id=document_id).first_or_404(description="Document not found")
    delete_entry(document)
    return jsonify({"success": True, "message": "Document deleted"}), 200
