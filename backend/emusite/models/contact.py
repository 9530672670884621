from emusite.extensions import db
from .base import BaseModel

CONTACT_FORM_STATUSES = ("new", "read", "replied", "archived")
CONTACT_SETTING_TYPES = ("headquarters", "contact", "businessHours")


class ContactForm(BaseModel):
    __tablename__ = 'contact_forms'

    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    attachments = db.Column(db.JSON, default=list)
    status = db.Column(db.String(20), nullable=False, default='new', index=True)
    notes = db.Column(db.Text)


class NotificationConfig(BaseModel):
    __tablename__ = 'notification_configs'

    name = db.Column(db.String(120), nullable=False)
    type = db.Column(db.String(50), nullable=False, index=True)
    description = db.Column(db.Text)
    emails = db.Column(db.JSON, nullable=False, default=list)
    enabled = db.Column(db.Boolean, nullable=False, default=True)


class ContactSetting(BaseModel):
    __tablename__ = 'contact_settings'

    type = db.Column(db.String(50), nullable=False, unique=True)
    data = db.Column(db.JSON, nullable=False, default=dict)


class GlobalOffice(BaseModel):
    __tablename__ = 'global_offices'

    name = db.Column(db.String(120), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    address = db.Column(db.Text, nullable=False)
    status = db.Column(db.Boolean, nullable=False, default=True)
