from emusite.extensions import db
from .base import BaseModel

CATEGORY_STATUSES = ("Active", "Inactive")


class ProductCategory(BaseModel):
    __tablename__ = 'product_categories'

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    description = db.Column(db.Text)
    icon = db.Column(db.String(255))
    image = db.Column(db.String(500))
    status = db.Column(db.String(20), nullable=False, default='Active', index=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    level = db.Column(db.Integer, nullable=False, default=1, index=True)

    parent_id = db.Column(db.String(36), db.ForeignKey('product_categories.id'), nullable=True, index=True)

    parent = db.relationship(
        "ProductCategory",
        remote_side="ProductCategory.id",
        back_populates="children"
    )
    children = db.relationship(
        "ProductCategory",
        back_populates="parent",
        order_by="ProductCategory.order"
    )
    products = db.relationship("Product", back_populates="category")
