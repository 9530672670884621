"""
Solutions, services and support articles share one CRUD shape:
paginated list with search/category/status filters, slug-unique create,
and get/update/delete by id.
"""
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.content import Solution, Service, SupportArticle
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.content import normalize_solution, normalize_service, normalize_support
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.content import (
    SolutionCreate, SolutionUpdate,
    ServiceCreate, ServiceUpdate,
    SupportCreate, SupportUpdate,
)
from emusite.utils.filters import search_filter
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp


def register_content_routes(name, model, create_schema, update_schema, normalize_fn, search_fields, nullable=()):
    label = name.rstrip("s").capitalize()

    def list_entries():
        page, per_page = get_page_args()
        query = model.query

        search = request.args.get("search")
        if search:
            query = query.filter(search_filter(model, search, *search_fields))

        category = request.args.get("category")
        if category and category != "all":
            query = query.filter(model.category == category)

        status = request.args.get("status")
        if status and status != "all":
            query = query.filter(model.status == status)

        items, meta = paginate_offset(
            query.order_by(model.created_at.desc()),
            page=page,
            per_page=per_page,
        )
        return jsonify(normalize_pagination(items, normalize_fn, meta)), 200

    @jwt_required()
    def create():
        data = validate(create_schema, request.get_json(silent=True))
        entry = create_entry(model, data.model_dump())
        return success(normalize_fn(entry), 201)

    def get(entry_id):
        entry = model.query.filter_by(id=entry_id).first_or_404(description=f"{label} not found")
        return success(normalize_fn(entry))

    @jwt_required()
    def update(entry_id):
        entry = model.query.filter_by(id=entry_id).first_or_404(description=f"{label} not found")
        data = validate(update_schema, request.get_json(silent=True))
        update_entry(entry, changes(data, nullable=nullable))
        return success(normalize_fn(entry))

    @jwt_required()
    def delete(entry_id):
        entry = model.query.filter_by(id=entry_id).first_or_404(description=f"{label} not found")
        delete_entry(entry)
        return jsonify({"success": True, "message": f"{label} deleted"}), 200

    api_bp.add_url_rule(f"/{name}", f"list_{name}", list_entries, methods=["GET"])
    api_bp.add_url_rule(f"/{name}", f"create_{name}", create, methods=["POST"])
    api_bp.add_url_rule(f"/{name}/<entry_id>", f"get_{name}", get, methods=["GET"])
    api_bp.add_url_rule(f"/{name}/<entry_id>", f"update_{name}", update, methods=["PUT"])
    api_bp.add_url_rule(f"/{name}/<entry_id>", f"delete_{name}", delete, methods=["DELETE"])


register_content_routes(
    "solutions", Solution, SolutionCreate, SolutionUpdate, normalize_solution,
    ("title", "slug", "description"), nullable=("cover_image",),
)
register_content_routes(
    "services", Service, ServiceCreate, ServiceUpdate, normalize_service,
    ("title", "slug", "description"), nullable=("icon",),
)
register_content_routes(
    "support", SupportArticle, SupportCreate, SupportUpdate, normalize_support,
    ("title", "slug", "content"),
)
