from typing import Any, Dict, List, Optional
from flask import current_app
from werkzeug.exceptions import NotFound
from emusite.extensions import db
from emusite.models.category import ProductCategory
from emusite.models.product import Product
from emusite.domain.exceptions import InvariantViolation
from emusite.utils.order import next_order
from emusite.utils.slug import slugify
from emusite.utils.transaction import transactional
from .content import ensure_unique, create_entry, update_entry


# ------------------------
# Categories
# ------------------------

def descendant_category_ids(category_id: str) -> List[str]:
    """
    The category itself plus every category below it, breadth first.
    Cycles in corrupt data are tolerated by tracking visited ids.
    """
    collected = [category_id]
    seen = {category_id}
    frontier = [category_id]

    while frontier:
        rows = (
            db.session.query(ProductCategory.id)
            .filter(ProductCategory.parent_id.in_(frontier))
            .all()
        )
        frontier = [row.id for row in rows if row.id not in seen]
        seen.update(frontier)
        collected.extend(frontier)

    return collected


def _resolve_parent(parent_id: Optional[str]) -> Optional[ProductCategory]:
    if not parent_id:
        return None

    parent = db.session.get(ProductCategory, parent_id)
    if parent is None:
        current_app.logger.warning("Category parent %s not found; treating as root", parent_id)
    return parent


def create_category(data: Dict[str, Any]) -> ProductCategory:
    """
    Create a product category.

    - slug defaults to the slugified name
    - level = parent.level + 1, or 1 without an (existing) parent
    - order = max(sibling order) + 1
    """
    slug = data.get("slug") or slugify(data["name"])
    if not slug:
        raise InvariantViolation("Slug could not be derived from name", field="slug")

    ensure_unique(ProductCategory, "slug", slug)

    parent = _resolve_parent(data.get("parent_id"))
    parent_id = parent.id if parent else None

    payload = {
        **data,
        "slug": slug,
        "parent_id": parent_id,
        "level": parent.level + 1 if parent else 1,
        "order": next_order(ProductCategory, start=1, parent_id=parent_id),
    }
    return create_entry(ProductCategory, payload)


def _relevel_descendants(category: ProductCategory) -> None:
    for child in category.children:
        child.level = category.level + 1
        _relevel_descendants(child)


def update_category(category: ProductCategory, data: Dict[str, Any]) -> ProductCategory:
    if "parent_id" in data:
        parent_id = data["parent_id"]

        if parent_id and parent_id in descendant_category_ids(category.id):
            raise InvariantViolation(
                "A category cannot be moved under itself or its descendants",
                field="parent_id",
            )

        parent = _resolve_parent(parent_id)
        data = {
            **data,
            "parent_id": parent.id if parent else None,
            "level": parent.level + 1 if parent else 1,
        }

    update_entry(category, data)

    if "level" in data:
        with transactional():
            _relevel_descendants(category)

    return category


def delete_category(category: ProductCategory) -> None:
    if ProductCategory.query.filter_by(parent_id=category.id).count():
        raise InvariantViolation("Cannot delete category with subcategories")

    if Product.query.filter_by(category_id=category.id).count():
        raise InvariantViolation("Cannot delete category with associated products")

    with transactional():
        db.session.delete(category)


def reorder_categories(positions: List[Dict[str, Any]]) -> None:
    """All-or-nothing: an unknown id aborts before anything is written."""
    ids = [p["id"] for p in positions]
    categories = {
        c.id: c for c in ProductCategory.query.filter(ProductCategory.id.in_(ids)).all()
    }

    missing = [category_id for category_id in ids if category_id not in categories]
    if missing:
        raise NotFound(f"Category not found: {missing[0]}")

    with transactional():
        for position in positions:
            categories[position["id"]].order = position["order"]


def active_product_count(category: ProductCategory, active_children: List[ProductCategory]) -> int:
    """Direct active products plus active products of the listed children."""
    ids = [category.id] + [child.id for child in active_children]
    return Product.query.filter(
        Product.category_id.in_(ids),
        Product.status == "Active",
    ).count()


# ------------------------
# Products
# ------------------------

def find_product(id_or_slug: str) -> Product:
    """Lookup by id first, then by slug."""
    product = db.session.get(Product, id_or_slug)
    if product is None:
        product = Product.query.filter_by(slug=id_or_slug).first()
    if product is None:
        raise NotFound("Product not found")
    return product


def _ensure_category(category_id: Optional[str]) -> None:
    if category_id and db.session.get(ProductCategory, category_id) is None:
        raise InvariantViolation("Category not found", field="category_id")


def create_product(data: Dict[str, Any]) -> Product:
    _ensure_category(data.get("category_id"))
    return create_entry(Product, data)


def update_product(product: Product, data: Dict[str, Any]) -> Product:
    if "category_id" in data:
        _ensure_category(data["category_id"])
    update_entry(product, data)
    return product


def discontinue_product(product: Product) -> Product:
    with transactional():
        product.status = "Discontinued"
    current_app.logger.info("Product %s discontinued", product.slug)
    return product
