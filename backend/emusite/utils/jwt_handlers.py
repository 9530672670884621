from flask import jsonify
from emusite.extensions import db
from emusite.models.user import User, Session


def _unauthorized(message):
    return jsonify({"success": False, "message": message}), 401


def register_jwt_handlers(jwt):
    """
    Tokens are only valid while their Session row exists and has not
    expired; logout deletes the row. The identity is the user id.
    """

    @jwt.token_in_blocklist_loader
    def session_revoked(jwt_header, jwt_payload):
        session = Session.query.filter_by(jti=jwt_payload["jti"]).first()
        return session is None or session.is_expired

    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_payload):
        user = db.session.get(User, jwt_payload["sub"])
        if user is None or not user.is_active:
            return None
        return user

    @jwt.user_lookup_error_loader
    def user_lookup_failed(jwt_header, jwt_payload):
        return _unauthorized("Unauthorized")

    @jwt.unauthorized_loader
    def missing_token(reason):
        return _unauthorized("Unauthorized")

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _unauthorized("Invalid token")

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _unauthorized("Token has expired")

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_payload):
        return _unauthorized("Session has ended")
