from flask import request, jsonify
from flask_jwt_extended import (
    jwt_required,
    current_user,
    set_access_cookies,
    unset_jwt_cookies,
)
from emusite.application.auth import authenticate, start_session, end_session
from emusite.normalizers.user import normalize_user
from emusite.schemas import validate
from emusite.schemas.auth import LoginSchema
from emusite.utils.responses import success
from . import api_bp


def presented_token():
    """Token from the `token` cookie, else from an Authorization: Bearer header."""
    token = request.cookies.get("token")
    if token:
        return token

    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip()
    return None


@api_bp.route("/auth/login", methods=["POST"])
def login():
    data = validate(LoginSchema, request.get_json(silent=True))

    user = authenticate(data.email, data.password)
    if user is None:
        return jsonify({
            "success": False,
            "message": "Invalid email or password"
        }), 401

    token, _ = start_session(user)

    response = jsonify({
        "success": True,
        "data": normalize_user(user),
    })
    set_access_cookies(response, token)
    return response, 200


@api_bp.route("/auth/logout", methods=["POST"])
def logout():
    end_session(presented_token())

    response = jsonify({"success": True, "message": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200


@api_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return success(normalize_user(current_user))
