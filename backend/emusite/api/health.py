from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from emusite.extensions import db
from . import api_bp


@api_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        current_app.logger.error("Health check failed: %s", exc)
        return jsonify({
            "status": "unhealthy",
            "database": "disconnected",
        }), 503

    return jsonify({
        "status": "healthy",
        "database": "connected",
    }), 200
