from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.page import Page
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.page import normalize_page
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.page import PageCreate, PageUpdate
from emusite.utils.filters import search_filter
from emusite.utils.optimistic_lock import enforce_optimistic_lock
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/pages", methods=["GET"])
def list_pages():
    page, per_page = get_page_args()
    query = Page.query

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(Page, search, "title", "slug", "content"))

    status = request.args.get("status")
    if status and status != "all":
        query = query.filter(Page.status == status)

    items, meta = paginate_offset(
        query.order_by(Page.created_at.desc()),
        page=page,
        per_page=per_page,
    )
    return jsonify(normalize_pagination(items, normalize_page, meta)), 200


@api_bp.route("/pages", methods=["POST"])
@jwt_required()
def create_page():
    data = validate(PageCreate, request.get_json(silent=True))
    page = create_entry(Page, data.model_dump())
    return success(normalize_page(page), 201)


@api_bp.route("/pages/<page_id>", methods=["GET"])
def get_page(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404(description="Page not found")
    return success(normalize_page(page))


@api_bp.route("/pages/<page_id>", methods=["PUT"])
@jwt_required()
def update_page(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404(description="Page not found")

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(page)

    data = validate(PageUpdate, request.get_json(silent=True))
    update_entry(page, changes(data, nullable=("hero",)))
    return success(normalize_page(page))


@api_bp.route("/pages/<page_id>", methods=["DELETE"])
@jwt_required()
def delete_page(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404(description="Page not found")
    delete_entry(page)
    return jsonify({"success": True, "message": "Page deleted"}), 200
