from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.product import Product
from emusite.application.catalog import (
    descendant_category_ids,
    find_product,
    create_product,
    update_product,
    discontinue_product,
)
from emusite.application.content import delete_entry
from emusite.normalizers.catalog import normalize_product
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.product import ProductCreate, ProductUpdate
from emusite.utils.filters import search_filter, arg_flag
from emusite.utils.optimistic_lock import enforce_optimistic_lock
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/products", methods=["GET"])
def list_products():
    page, per_page = get_page_args()
    query = Product.query

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(Product, search, "name", "slug", "description"))

    # A category filter includes every descendant category
    category = request.args.get("category")
    if category and category != "all":
        query = query.filter(Product.category_id.in_(descendant_category_ids(category)))

    status = request.args.get("status")
    if status and status != "all":
        query = query.filter(Product.status == status)

    items, meta = paginate_offset(
        query.order_by(Product.created_at.desc()),
        page=page,
        per_page=per_page,
    )
    return jsonify(normalize_pagination(items, normalize_product, meta)), 200


@api_bp.route("/products", methods=["POST"])
@jwt_required()
def create_product_route():
    data = validate(ProductCreate, request.get_json(silent=True))
    product = create_product(data.model_dump())
    return success(normalize_product(product), 201)


@api_bp.route("/products/<id_or_slug>", methods=["GET"])
def get_product(id_or_slug):
    return success(normalize_product(find_product(id_or_slug)))


@api_bp.route("/products/<id_or_slug>", methods=["PUT"])
@jwt_required()
def update_product_route(id_or_slug):
    product = find_product(id_or_slug)
    enforce_optimistic_lock(product)

    data = validate(ProductUpdate, request.get_json(silent=True))
    update_product(product, changes(data, nullable=("category_id",)))
    return success(normalize_product(product))


@api_bp.route("/products/<id_or_slug>", methods=["DELETE"])
@jwt_required()
def delete_product(id_or_slug):
    """Discontinues by default; ?hard=true removes the row."""
    product = find_product(id_or_slug)

    if arg_flag(request.args, "hard"):
        delete_entry(product)
        return jsonify({"success": True, "message": "Product deleted"}), 200

    discontinue_product(product)
    return success(normalize_product(product), message="Product discontinued")
