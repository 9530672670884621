from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.faq import FAQ
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.content import normalize_faq
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.faq import FAQCreate, FAQUpdate
from emusite.utils.filters import search_filter
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/faq", methods=["GET"])
def list_faqs():
    page, per_page = get_page_args()
    query = FAQ.query

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(FAQ, search, "question", "answer"))

    category = request.args.get("category")
    if category and category != "all":
        query = query.filter(FAQ.category == category)

    status = request.args.get("status")
    if status and status != "all":
        query = query.filter(FAQ.status == status)

    items, meta = paginate_offset(
        query.order_by(FAQ.order.asc(), FAQ.created_at.desc()),
        page=page,
        per_page=per_page,
    )
    return jsonify(normalize_pagination(items, normalize_faq, meta)), 200


@api_bp.route("/faq", methods=["POST"])
@jwt_required()
def create_faq():
    data = validate(FAQCreate, request.get_json(silent=True))
    faq = create_entry(FAQ, data.model_dump(), unique_fields=())
    return success(normalize_faq(faq), 201)


@api_bp.route("/faq/<faq_id>", methods=["GET"])
def get_faq(faq_id):
    faq = FAQ.query.filter_by(id=faq_id).first_or_404(description="FAQ not found")
    return success(normalize_faq(faq))


@api_bp.route("/faq/<faq_id>", methods=["PUT"])
@jwt_required()
def update_faq(faq_id):
    faq = FAQ.query.filter_by(id=faq_id).first_or_404(description="FAQ not found")
    data = validate(FAQUpdate, request.get_json(silent=True))
    update_entry(faq, changes(data), unique_fields=())
    return success(normalize_faq(faq))


@api_bp.route("/faq/<faq_id>", methods=["DELETE"])
@jwt_required()
def delete_faq(faq_id):
    faq = FAQ.query.filter_by(id=faq_id).first_or_404(description="FAQ not found")
    delete_entry(faq)
    return jsonify({"success": True, "message": "FAQ deleted"}), 200
