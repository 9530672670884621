from emusite.extensions import db
from .base import BaseModel


class SocialMedia(BaseModel):
    __tablename__ = 'social_media'

    platform = db.Column(db.String(50), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    icon = db.Column(db.String(100))
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    qr_code = db.Column(db.String(500))
    has_qr_code = db.Column(db.Boolean, nullable=False, default=False)
