from emusite.extensions import db
from .base import BaseModel, utc_now

NEWS_STATUSES = ("Published", "Draft")


class News(BaseModel):
    __tablename__ = 'news'

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    category = db.Column(db.String(100), nullable=False, default='')
    status = db.Column(db.String(20), nullable=False, default='Draft', index=True)
    publish_date = db.Column(db.DateTime, nullable=False, default=utc_now, index=True)
    content = db.Column(db.Text, default='')
    excerpt = db.Column(db.Text)
    cover_image = db.Column(db.JSON(none_as_null=True))
    attachments = db.Column(db.JSON, default=list)
