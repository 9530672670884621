from emusite.extensions import db
from .base import BaseModel

PRODUCT_STATUSES = ("Active", "Coming Soon", "Discontinued")


class Product(BaseModel):
    __tablename__ = 'products'

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    status = db.Column(db.String(50), nullable=False, default='Active', index=True)
    description = db.Column(db.Text, default='')
    full_description = db.Column(db.Text)
    features = db.Column(db.Text, default='')
    specifications = db.Column(db.Text, default='')
    models = db.Column(db.Text, default='')
    images = db.Column(db.JSON, default=list)
    files = db.Column(db.JSON, default=list)

    category_id = db.Column(db.String(36), db.ForeignKey('product_categories.id'), nullable=True, index=True)
    category = db.relationship("ProductCategory", back_populates="products")
