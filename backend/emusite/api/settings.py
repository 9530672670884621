import smtplib
from flask import request, jsonify, current_app
from flask_jwt_extended import jwt_required
from emusite.application.settings import (
    get_setting,
    save_setting,
    website_settings,
    smtp_status,
    get_or_create_seo,
)
from emusite.application.seo import write_sitemap, generate_robots_txt
from emusite.application.content import update_entry
from emusite.normalizers.site import normalize_seo_settings
from emusite.schemas import validate, changes
from emusite.schemas.setting import WebsiteSettings, SMTPSettings, SMTPTest, SEOSettingsUpdate
from emusite.utils.decorators import roles_required
from emusite.utils.mailer import send_mail, verify_connection
from emusite.utils.responses import success
from . import api_bp


# ------------------------
# Website
# ------------------------

@api_bp.route("/settings/website", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_website_settings():
    return success(website_settings())


@api_bp.route("/settings/website", methods=["POST"])
@jwt_required()
@roles_required("admin")
def save_website_settings():
    data = validate(WebsiteSettings, request.get_json(silent=True))
    setting = save_setting("website", data.model_dump())
    return success(setting.data, message="Website settings saved")


# ------------------------
# SMTP
# ------------------------

@api_bp.route("/settings/smtp", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_smtp_settings():
    smtp = get_setting("smtp") or {}
    # Never echo the stored password back
    return success({key: value for key, value in smtp.items() if key != "password"})


@api_bp.route("/settings/smtp", methods=["POST"])
@jwt_required()
@roles_required("admin")
def save_smtp_settings():
    """
    action=test checks the submitted settings against the server (and
    mails test_email when given) without saving them.
    """
    payload = request.get_json(silent=True) or {}

    if payload.get("action") == "test":
        data = validate(SMTPTest, {k: v for k, v in payload.items() if k != "action"})
        smtp = data.model_dump(exclude={"test_email"})

        try:
            verify_connection(smtp)
            if data.test_email:
                send_mail(
                    smtp,
                    [data.test_email],
                    subject="SMTP Test Email",
                    text="Your SMTP settings are working.",
                )
        except (smtplib.SMTPException, OSError) as exc:
            current_app.logger.warning("SMTP test against %s failed: %s", smtp["host"], exc)
            return jsonify({
                "success": False,
                "message": f"SMTP connection failed: {exc}",
            }), 400

        return jsonify({"success": True, "message": "SMTP connection successful"}), 200

    data = validate(SMTPSettings, payload)
    save_setting("smtp", data.model_dump())
    return jsonify({"success": True, "message": "SMTP settings saved"}), 200


@api_bp.route("/settings/smtp/check", methods=["GET"])
@jwt_required()
@roles_required("admin")
def check_smtp_settings():
    return success(smtp_status())


# ------------------------
# SEO
# ------------------------

@api_bp.route("/settings/seo", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_seo_settings():
    return success(normalize_seo_settings(get_or_create_seo()))


@api_bp.route("/settings/seo", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_seo_settings():
    seo = get_or_create_seo()
    data = validate(SEOSettingsUpdate, request.get_json(silent=True))
    update_entry(seo, changes(data, nullable=("robots_txt",)), unique_fields=())
    return success(normalize_seo_settings(seo))


@api_bp.route("/settings/generate-sitemap", methods=["POST"])
@jwt_required()
@roles_required("admin")
def generate_sitemap():
    write_sitemap()
    return jsonify({"success": True, "message": "Sitemap generated"}), 200


@api_bp.route("/settings/generate-robots", methods=["POST"])
@jwt_required()
@roles_required("admin")
def generate_robots():
    content = generate_robots_txt()
    return success({"robots_txt": content}, message="robots.txt generated")
