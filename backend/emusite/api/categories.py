from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.category import ProductCategory
from emusite.models.product import Product
from emusite.application.catalog import (
    create_category,
    update_category,
    delete_category,
    reorder_categories,
    active_product_count,
)
from emusite.normalizers.catalog import normalize_category
from emusite.schemas import validate, changes
from emusite.schemas.category import CategoryCreate, CategoryUpdate, CategoryReorder
from emusite.utils.filters import arg_flag
from emusite.utils.responses import success
from . import api_bp


def _children(category, include_inactive):
    children = [
        c for c in category.children
        if include_inactive or c.status == "Active"
    ]
    return sorted(children, key=lambda c: c.order)


@api_bp.route("/categories", methods=["GET"])
def list_categories():
    """
    Roots (level 1) or the children of `parent_id`, each with its
    children and an active product count that includes the children.
    """
    parent_id = request.args.get("parent_id")
    include_inactive = arg_flag(request.args, "include_inactive")
    include_products = arg_flag(request.args, "include_products")

    query = ProductCategory.query
    if parent_id:
        query = query.filter_by(parent_id=parent_id)
    else:
        query = query.filter_by(level=1)
    if not include_inactive:
        query = query.filter_by(status="Active")

    data = []
    for category in query.order_by(ProductCategory.order.asc()).all():
        children = _children(category, include_inactive)
        item = normalize_category(
            category,
            children=[normalize_category(c) for c in children],
            product_count=active_product_count(category, children),
        )
        if include_products:
            item["products"] = [
                {"id": p.id, "name": p.name, "slug": p.slug}
                for p in Product.query.filter_by(category_id=category.id, status="Active").all()
            ]
        data.append(item)

    return success(data)


@api_bp.route("/categories", methods=["POST"])
@jwt_required()
def create_category_route():
    data = validate(CategoryCreate, request.get_json(silent=True))
    category = create_category(data.model_dump())
    return success(normalize_category(category), 201)


@api_bp.route("/categories/reorder", methods=["POST"])
@jwt_required()
def reorder_categories_route():
    data = validate(CategoryReorder, request.get_json(silent=True))
    reorder_categories([c.model_dump() for c in data.categories])
    return jsonify({"success": True}), 200


@api_bp.route("/categories/<category_id>", methods=["GET"])
def get_category(category_id):
    category = ProductCategory.query.filter_by(id=category_id).first_or_404(description="Category not found")
    children = _children(category, include_inactive=False)

    data = normalize_category(
        category,
        children=[normalize_category(c) for c in children],
        product_count=Product.query.filter_by(category_id=category.id).count(),
    )
    data["parent"] = normalize_category(category.parent) if category.parent else None
    return success(data)


@api_bp.route("/categories/<category_id>", methods=["PUT"])
@jwt_required()
def update_category_route(category_id):
    category = ProductCategory.query.filter_by(id=category_id).first_or_404(description="Category not found")
    data = validate(CategoryUpdate, request.get_json(silent=True))
    update_category(category, changes(data, nullable=("parent_id",)))
    return success(normalize_category(category))


@api_bp.route("/categories/<category_id>", methods=["DELETE"])
@jwt_required()
def delete_category_route(category_id):
    category = ProductCategory.query.filter_by(id=category_id).first_or_404(description="Category not found")
    delete_category(category)
    return jsonify({"success": True, "message": "Category deleted"}), 200
