from flask import request, redirect, url_for, current_app
from flask_jwt_extended import verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

PUBLIC_ADMIN_PATHS = ("/admin/login",)


def admin_middleware(app):
    @app.before_request
    def require_admin_session():
        path = request.path
        if path != "/admin" and not path.startswith("/admin/"):
            return None
        if path.rstrip("/") in PUBLIC_ADMIN_PATHS:
            return None

        try:
            verify_jwt_in_request(locations=["cookies"])
        except (JWTExtendedException, PyJWTError) as exc:
            current_app.logger.info("Admin access to %s refused: %s", path, exc)
            return redirect(url_for("admin.login", next=path))

        return None
