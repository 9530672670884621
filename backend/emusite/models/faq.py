from emusite.extensions import db
from .base import BaseModel

FAQ_STATUSES = ("Active", "Draft")


class FAQ(BaseModel):
    __tablename__ = 'faqs'

    question = db.Column(db.String(500), nullable=False)
    answer = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False, default='General', index=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)
