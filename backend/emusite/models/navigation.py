from emusite.extensions import db
from .base import BaseModel

NAVIGATION_TYPES = ("header", "footer")


class NavigationItem(BaseModel):
    __tablename__ = 'navigation_items'

    label = db.Column(db.String(120), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    type = db.Column(db.String(20), nullable=False, default='header', index=True)
    active = db.Column(db.Boolean, nullable=False, default=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    # Plain column: the tree is assembled in Python from a flat fetch
    parent_id = db.Column(db.String(36), db.ForeignKey('navigation_items.id', ondelete='SET NULL'), nullable=True, index=True)
