import smtplib
from typing import Any, Dict
from flask import current_app, render_template
from emusite.extensions import db
from emusite.models.contact import ContactForm, NotificationConfig
from emusite.domain.exceptions import InvariantViolation
from emusite.utils.mailer import send_mail
from emusite.utils.transaction import transactional
from .settings import get_setting

NEW_CONTACT_NOTIFICATION = "new_contact"


def submit_contact_form(data: Dict[str, Any]) -> ContactForm:
    """
    Persist the submission first, then notify.

    A failed notification never fails the submission: the error is
    written to the record's notes instead.
    """
    form = ContactForm(**data)

    with transactional():
        db.session.add(form)

    try:
        notify_new_contact(form)
    except (smtplib.SMTPException, OSError) as exc:
        current_app.logger.error("Contact notification failed for %s: %s", form.id, exc)
        with transactional():
            form.notes = f"Email notification failed: {exc}"

    return form


def notify_new_contact(form: ContactForm) -> bool:
    """
    Email the recipients of the enabled `new_contact` config using the
    stored SMTP settings. Skipped (False) when either is missing.
    """
    smtp = get_setting("smtp")
    if not smtp:
        current_app.logger.warning("SMTP settings not found; contact notification skipped")
        return False

    config = NotificationConfig.query.filter_by(
        type=NEW_CONTACT_NOTIFICATION,
        enabled=True,
    ).first()
    if config is None or not config.emails:
        current_app.logger.warning("No enabled new_contact notification; contact notification skipped")
        return False

    send_mail(
        smtp,
        config.emails,
        subject=f"New Contact Form Submission: {form.subject}",
        text=render_template("mail/new_contact.txt", form=form),
        html=render_template("mail/new_contact.html", form=form),
    )
    return True


def send_test_notification(config: NotificationConfig) -> None:
    """SMTP errors propagate to the caller."""
    smtp = get_setting("smtp")
    if not smtp:
        raise InvariantViolation("SMTP settings not found")

    send_mail(
        smtp,
        config.emails,
        subject=f"Test Notification - {config.name}",
        text=(
            f"This is a test notification for: {config.name}\n\n"
            f"Type: {config.type}\nDescription: {config.description}"
        ),
    )
