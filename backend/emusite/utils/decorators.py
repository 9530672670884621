from functools import wraps
from flask import jsonify
from flask_jwt_extended import current_user


def roles_required(*allowed_roles):
    """
    Must be stacked under @jwt_required(). The role is read from the
    user row loaded for this request, not from the token claims.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if current_user.role not in allowed_roles:
                return jsonify({
                    "success": False,
                    "message": "Insufficient permissions"
                }), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
