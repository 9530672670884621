from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.user import User
from emusite.application.users import create_user, update_user, delete_user
from emusite.normalizers.user import normalize_user
from emusite.schemas import validate, changes
from emusite.schemas.user import UserCreate, UserUpdate
from emusite.utils.decorators import roles_required
from emusite.utils.filters import search_filter
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/users", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_users():
    query = User.query

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(User, search, "email", "name"))

    users = query.order_by(User.created_at.desc()).all()
    return success([normalize_user(u) for u in users])


@api_bp.route("/users", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_user_route():
    data = validate(UserCreate, request.get_json(silent=True))
    user = create_user(data.model_dump())
    return success(normalize_user(user), 201)


@api_bp.route("/users/<user_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_user(user_id):
    user = User.query.filter_by(id=user_id).first_or_404(description="User not found")
    return success(normalize_user(user))


@api_bp.route("/users/<user_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_user_route(user_id):
    user = User.query.filter_by(id=user_id).first_or_404(description="User not found")
    data = validate(UserUpdate, request.get_json(silent=True))
    update_user(user, changes(data))
    return success(normalize_user(user))


@api_bp.route("/users/<user_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_user_route(user_id):
    user = User.query.filter_by(id=user_id).first_or_404(description="User not found")
    delete_user(user)
    return jsonify({"success": True, "message": "User deleted"}), 200
