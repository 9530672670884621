from emusite.extensions import db
from .base import BaseModel


class Download(BaseModel):
    __tablename__ = 'downloads'

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    category = db.Column(db.String(100), nullable=False, index=True)
    version = db.Column(db.String(50))
    file_url = db.Column(db.String(500), nullable=False)
    file_size = db.Column(db.String(50))
    file_type = db.Column(db.String(50))
    thumbnail = db.Column(db.String(500))
    featured = db.Column(db.Boolean, nullable=False, default=False)
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)
    downloads = db.Column(db.Integer, nullable=False, default=0)
