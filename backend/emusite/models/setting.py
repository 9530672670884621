from emusite.extensions import db
from .base import BaseModel

SETTING_TYPES = ("website", "smtp")


class Setting(BaseModel):
    """Typed JSON settings blob, one row per type."""
    __tablename__ = 'settings'

    type = db.Column(db.String(50), nullable=False, unique=True)
    data = db.Column(db.JSON, nullable=False, default=dict)


class GlobalSEO(BaseModel):
    __tablename__ = 'global_seo'

    description = db.Column(db.Text, default='')
    keywords = db.Column(db.Text, default='')
    og_image = db.Column(db.String(500))
    robots_txt = db.Column(db.Text)
    google_verification = db.Column(db.String(255))
    bing_verification = db.Column(db.String(255))
    custom_meta_tags = db.Column(db.JSON, default=list)
