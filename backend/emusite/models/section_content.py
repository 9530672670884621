from emusite.extensions import db
from .base import BaseModel

DEFAULT_FEATURE_TITLE = "Key Features"
DEFAULT_FEATURE_SUBTITLE = "Discover what makes our solutions stand out"
DEFAULT_MAP_TITLE = "Remote Connectivity"
DEFAULT_MAP_SUBTITLE = (
    "Break free from traditional boundaries. Run your test bench from anywhere "
    "with remote access to every emulator channel."
)


class SectionContent(BaseModel):
    """One editable block of the homepage (hero, features, map, ...)."""
    __tablename__ = 'section_contents'

    name = db.Column(db.String(100), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)

    badge = db.Column(db.JSON(none_as_null=True))
    actions = db.Column(db.JSON, default=list)
    media = db.Column(db.JSON(none_as_null=True))
    features = db.Column(db.JSON, default=list)
    map_points = db.Column(db.JSON, default=list)

    feature_title = db.Column(db.String(255), default=DEFAULT_FEATURE_TITLE)
    feature_subtitle = db.Column(db.String(500), default=DEFAULT_FEATURE_SUBTITLE)
    map_title = db.Column(db.String(255), default=DEFAULT_MAP_TITLE)
    map_subtitle = db.Column(db.String(500), default=DEFAULT_MAP_SUBTITLE)
    thumbnail = db.Column(db.String(500))
