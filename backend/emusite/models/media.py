from emusite.extensions import db
from .base import BaseModel

MEDIA_CATEGORY_STATUSES = ("Active", "Archived")
MEDIA_ASSET_STATUSES = ("Active", "Archived", "Deleted")


class MediaCategory(BaseModel):
    __tablename__ = 'media_categories'

    name = db.Column(db.String(120), nullable=False, index=True)
    description = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)

    parent_id = db.Column(db.String(36), db.ForeignKey('media_categories.id'), nullable=True, index=True)

    parent = db.relationship(
        "MediaCategory",
        remote_side="MediaCategory.id",
        back_populates="children"
    )
    children = db.relationship("MediaCategory", back_populates="parent")


class MediaAsset(BaseModel):
    __tablename__ = 'media_assets'

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default='')
    type = db.Column(db.String(50), nullable=False, index=True)
    category = db.Column(db.String(120), nullable=False, index=True)
    sub_category = db.Column(db.String(120))
    path = db.Column(db.String(500), nullable=False)
    size = db.Column(db.Integer, nullable=False, default=0)
    mime_type = db.Column(db.String(120))
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)
    tags = db.Column(db.JSON, default=list)
    # "metadata" is reserved on declarative models
    meta = db.Column("metadata", db.JSON, default=dict)
    downloads = db.Column(db.Integer, nullable=False, default=0)

    versions = db.relationship(
        "MediaVersion",
        back_populates="asset",
        order_by="MediaVersion.created_at",
        cascade="all, delete-orphan"
    )
    usages = db.relationship(
        "MediaUsage",
        back_populates="asset",
        cascade="all, delete-orphan"
    )
    properties = db.relationship(
        "MediaProperty",
        back_populates="asset",
        cascade="all, delete-orphan"
    )


class MediaVersion(BaseModel):
    __tablename__ = 'media_versions'

    asset_id = db.Column(db.String(36), db.ForeignKey('media_assets.id', ondelete='CASCADE'), nullable=False, index=True)
    version = db.Column(db.String(50), nullable=False)
    changelog = db.Column(db.Text)
    path = db.Column(db.String(500), nullable=False)
    size = db.Column(db.Integer, nullable=False, default=0)

    asset = db.relationship("MediaAsset", back_populates="versions")


class MediaUsage(BaseModel):
    __tablename__ = 'media_usages'

    asset_id = db.Column(db.String(36), db.ForeignKey('media_assets.id', ondelete='CASCADE'), nullable=False, index=True)
    entity_type = db.Column(db.String(50), nullable=False)
    entity_id = db.Column(db.String(100), nullable=False)

    asset = db.relationship("MediaAsset", back_populates="usages")


class MediaProperty(BaseModel):
    __tablename__ = 'media_properties'

    asset_id = db.Column(db.String(36), db.ForeignKey('media_assets.id', ondelete='CASCADE'), nullable=False, index=True)
    key = db.Column(db.String(120), nullable=False)
    value = db.Column(db.Text, nullable=False)

    asset = db.relationship("MediaAsset", back_populates="properties")

    __table_args__ = (
        db.UniqueConstraint("asset_id", "key", name="uq_media_property_key_per_asset"),
    )
