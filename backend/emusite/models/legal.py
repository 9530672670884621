from emusite.extensions import db
from .base import BaseModel


class LegalDocument(BaseModel):
    __tablename__ = 'legal_documents'

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(50), nullable=False, index=True)
    content = db.Column(db.Text, nullable=False)
    version = db.Column(db.String(50), nullable=False)
    effective_date = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)

    __table_args__ = (
        db.UniqueConstraint("type", "slug", name="uq_legal_type_slug"),
    )
