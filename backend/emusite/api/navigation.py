from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.navigation import NavigationItem, NAVIGATION_TYPES
from emusite.application.navigation import (
    navigation_tree,
    create_navigation_item,
    update_navigation_item,
    delete_navigation_item,
    reorder_navigation,
)
from emusite.normalizers.navigation import normalize_navigation_item
from emusite.schemas import validate, changes
from emusite.schemas.navigation import NavigationCreate, NavigationUpdate, NavigationReorder
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/navigation", methods=["GET"])
def get_navigation():
    nav_type = request.args.get("type", "header")
    if nav_type not in NAVIGATION_TYPES:
        return jsonify({
            "success": False,
            "message": "Validation failed",
            "errors": [{
                "field": "type",
                "message": "type must be one of: " + ", ".join(NAVIGATION_TYPES),
                "type": "enum",
            }],
        }), 400

    tree = navigation_tree(nav_type, parent_id=request.args.get("parent_id") or None)
    return success(tree)


@api_bp.route("/navigation", methods=["POST"])
@jwt_required()
def create_navigation():
    data = validate(NavigationCreate, request.get_json(silent=True))
    item = create_navigation_item(data.model_dump())
    return success(normalize_navigation_item(item), 201)


# Registered before /navigation/<item_id> so "reorder" is never taken for an id
@api_bp.route("/navigation/reorder", methods=["PATCH"])
@jwt_required()
def reorder_navigation_route():
    data = validate(NavigationReorder, request.get_json(silent=True))
    reorder_navigation([item.model_dump() for item in data.items])
    return jsonify({"success": True}), 200


@api_bp.route("/navigation/<item_id>", methods=["GET"])
def get_navigation_item(item_id):
    item = NavigationItem.query.filter_by(id=item_id).first_or_404(description="Navigation item not found")
    return success(normalize_navigation_item(item))


@api_bp.route("/navigation/<item_id>", methods=["PUT"])
@jwt_required()
def update_navigation(item_id):
    item = NavigationItem.query.filter_by(id=item_id).first_or_404(description="Navigation item not found")
    data = validate(NavigationUpdate, request.get_json(silent=True))
    update_navigation_item(item, changes(data, nullable=("parent_id",)))
    return success(normalize_navigation_item(item))


@api_bp.route("/navigation/<item_id>", methods=["DELETE"])
@jwt_required()
def delete_navigation(item_id):
    item = NavigationItem.query.filter_by(id=item_id).first_or_404(description="Navigation item not found")
    delete_navigation_item(item)
    return jsonify({"success": True, "message": "Navigation item deleted"}), 200
