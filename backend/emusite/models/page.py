from emusite.extensions import db
from .base import BaseModel

PAGE_STATUSES = ("Draft", "Published", "Archived")


class Page(BaseModel):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    status = db.Column(db.String(50), default='Draft', index=True)
    content = db.Column(db.Text, default='')
    hero = db.Column(db.JSON(none_as_null=True))
    seo = db.Column(db.JSON(none_as_null=True), default=dict)
