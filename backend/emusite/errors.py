from flask import jsonify, request, render_template, current_app
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException
from emusite.domain.exceptions import InvariantViolation
from emusite.schemas import format_validation_errors


def _is_api_request():
    return request.path.startswith("/api")


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        payload = {
            "success": False,
            "message": error.message,
        }
        if error.field:
            payload["errors"] = [{
                "field": error.field,
                "message": error.message,
                "type": "invariant",
            }]

        response = jsonify(payload)
        response.status_code = 400
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        response = jsonify({
            "success": False,
            "message": "Validation failed",
            "errors": format_validation_errors(error),
        })
        response.status_code = 400
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if _is_api_request():
            response = jsonify({
                "success": False,
                "message": error.description,
            })
            response.status_code = error.code
            return response

        if error.code == 404:
            return render_template("site/404.html"), 404

        return error

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)

        if _is_api_request():
            response = jsonify({
                "success": False,
                "message": "Internal server error",
            })
            response.status_code = 500
            return response

        return render_template("site/500.html"), 500
