from emusite.extensions import db
from .base import BaseModel

CONTENT_STATUSES = ("Active", "Draft", "Archived")


class ContentMixin:
    """Columns shared by the slug-addressed marketing content types."""

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    category = db.Column(db.String(100), nullable=False, default='')
    status = db.Column(db.String(20), nullable=False, default='Draft', index=True)
    content = db.Column(db.Text, default='')


class Solution(BaseModel, ContentMixin):
    __tablename__ = 'solutions'

    description = db.Column(db.Text, default='')
    cover_image = db.Column(db.JSON(none_as_null=True))
    gallery = db.Column(db.JSON, default=list)
    features = db.Column(db.JSON, default=list)


class Service(BaseModel, ContentMixin):
    __tablename__ = 'services'

    description = db.Column(db.Text, default='')
    icon = db.Column(db.JSON(none_as_null=True))
    features = db.Column(db.JSON, default=list)


class SupportArticle(BaseModel, ContentMixin):
    __tablename__ = 'support_articles'

    attachments = db.Column(db.JSON, default=list)
