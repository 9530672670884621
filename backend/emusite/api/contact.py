import smtplib
from flask import request, jsonify, current_app
from flask_jwt_extended import jwt_required
from dateutil.parser import parse, ParserError
from emusite.extensions import db
from emusite.models.base import as_naive_utc
from emusite.models.contact import ContactForm, NotificationConfig, ContactSetting, GlobalOffice
from emusite.application.contact import submit_contact_form, send_test_notification
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.domain.exceptions import InvariantViolation
from emusite.normalizers.contact import (
    normalize_contact_form,
    normalize_notification,
    normalize_contact_setting,
    normalize_office,
)
from emusite.schemas import validate, changes
from emusite.schemas.contact import (
    ContactFormCreate,
    ContactFormUpdate,
    NotificationCreate,
    NotificationUpdate,
    ContactSettingUpsert,
    OfficeCreate,
    OfficeUpdate,
)
from emusite.utils.filters import search_filter
from emusite.utils.responses import success
from emusite.utils.transaction import transactional
from . import api_bp


def _date_arg(name):
    value = request.args.get(name)
    if not value:
        return None
    try:
        return as_naive_utc(parse(value))
    except (ParserError, OverflowError, ValueError):
        raise InvariantViolation(f"Invalid date: {value}", field=name)


# ------------------------
# Submissions
# ------------------------

@api_bp.route("/contact/form", methods=["POST"])
def submit_form():
    data = validate(ContactFormCreate, request.get_json(silent=True))
    form = submit_contact_form(data.model_dump())
    return success(normalize_contact_form(form), 201)


@api_bp.route("/contact/form", methods=["GET"])
@jwt_required()
def list_forms():
    query = ContactForm.query

    status = request.args.get("status")
    if status and status != "all":
        query = query.filter_by(status=status)

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(ContactForm, search, "first_name", "last_name", "email", "company"))

    from_date = _date_arg("from_date")
    if from_date:
        query = query.filter(ContactForm.created_at >= from_date)
    to_date = _date_arg("to_date")
    if to_date:
        query = query.filter(ContactForm.created_at <= to_date)

    forms = query.order_by(ContactForm.created_at.desc()).all()
    return success([normalize_contact_form(f) for f in forms])


@api_bp.route("/contact/form/<form_id>", methods=["PATCH"])
@jwt_required()
def update_form(form_id):
    form = ContactForm.query.filter_by(id=form_id).first_or_404(description="Contact form not found")
    data = validate(ContactFormUpdate, request.get_json(silent=True))
    update_entry(form, changes(data, nullable=("notes",)), unique_fields=())
    return success(normalize_contact_form(form))


@api_bp.route("/contact/form/<form_id>", methods=["DELETE"])
@jwt_required()
def delete_form(form_id):
    form = ContactForm.query.filter_by(id=form_id).first_or_404(description="Contact form not found")
    delete_entry(form)
    return jsonify({"success": True}), 200


# ------------------------
# Notification configs
# ------------------------

@api_bp.route("/contact/notifications", methods=["GET"])
@jwt_required()
def list_notifications():
    configs = NotificationConfig.query.order_by(NotificationConfig.created_at.desc()).all()
    return success([normalize_notification(c) for c in configs])


@api_bp.route("/contact/notifications", methods=["POST"])
@jwt_required()
def create_notification():
    data = validate(NotificationCreate, request.get_json(silent=True))
    config = create_entry(NotificationConfig, data.model_dump(), unique_fields=())
    return success(normalize_notification(config), 201)


@api_bp.route("/contact/notifications/<config_id>", methods=["PATCH"])
@jwt_required()
def update_notification(config_id):
    config = NotificationConfig.query.filter_by(id=config_id).first_or_404(description="Configuration not found")
    data = validate(NotificationUpdate, request.get_json(silent=True))
    update_entry(config, changes(data), unique_fields=())
    return success(normalize_notification(config))


@api_bp.route("/contact/notifications/<config_id>", methods=["DELETE"])
@jwt_required()
def delete_notification(config_id):
    config = NotificationConfig.query.filter_by(id=config_id).first_or_404(description="Configuration not found")
    delete_entry(config)
    return jsonify({"success": True}), 200


@api_bp.route("/contact/notifications/<config_id>/test", methods=["POST"])
@jwt_required()
def test_notification(config_id):
    config = NotificationConfig.query.filter_by(id=config_id).first_or_404(description="Configuration not found")

    try:
        send_test_notification(config)
    except (smtplib.SMTPException, OSError) as exc:
        current_app.logger.error("Test notification %s failed: %s", config.id, exc)
        return jsonify({
            "success": False,
            "message": f"Failed to send test notification: {exc}",
        }), 500

    return jsonify({"success": True, "message": "Test notification sent"}), 200


# ------------------------
# Contact settings (upsert by type)
# ------------------------

@api_bp.route("/contact/settings", methods=["GET"])
def list_contact_settings():
    settings = ContactSetting.query.order_by(ContactSetting.type.asc()).all()
    return success([normalize_contact_setting(s) for s in settings])


@api_bp.route("/contact/settings", methods=["POST"])
@jwt_required()
def upsert_contact_setting():
    data = validate(ContactSettingUpsert, request.get_json(silent=True))
    setting = ContactSetting.query.filter_by(type=data.type).first()

    with transactional():
        if setting is None:
            setting = ContactSetting(type=data.type, data=data.data)
            db.session.add(setting)
        else:
            setting.data = data.data

    return success(normalize_contact_setting(setting))


# ------------------------
# Offices
# ------------------------

@api_bp.route("/contact/offices", methods=["GET"])
def list_offices():
    offices = GlobalOffice.query.order_by(GlobalOffice.created_at.asc()).all()
    return success([normalize_office(o) for o in offices])


@api_bp.route("/contact/offices", methods=["POST"])
@jwt_required()
def create_office():
    data = validate(OfficeCreate, request.get_json(silent=True))
    office = create_entry(GlobalOffice, data.model_dump(), unique_fields=())
    return success(normalize_office(office), 201)


@api_bp.route("/contact/offices/<office_id>", methods=["PATCH"])
@jwt_required()
def update_office(office_id):
    office = GlobalOffice.query.filter_by(id=office_id).first_or_404(description="Office not found")
    data = validate(OfficeUpdate, request.get_json(silent=True))
    update_entry(office, changes(data), unique_fields=())
    return success(normalize_office(office))


@api_bp.route("/contact/offices/<office_id>", methods=["DELETE"])
@jwt_required()
def delete_office(office_id):
    office = GlobalOffice.query.filter_by(id=office_id).first_or_404(description="Office not found")
    delete_entry(office)
    return jsonify({"success": True}), 200
