from emusite.utils.media import absolute_url
from .common import timestamps


def normalize_category(category, children=None, product_count=None):
    data = {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "icon": category.icon,
        "image": category.image,
        "status": category.status,
        "order": category.order,
        "level": category.level,
        "parent_id": category.parent_id,
        **timestamps(category),
    }

    if children is not None:
        data["children"] = children
    if product_count is not None:
        data["product_count"] = product_count

    return data


def normalize_product(product):
    return {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "category_id": product.category_id,
        "category": {
            "id": product.category.id,
            "name": product.category.name,
            "slug": product.category.slug,
        } if product.category else None,
        "status": product.status,
        "description": product.description,
        "full_description": product.full_description,
        "features": product.features or "",
        "specifications": product.specifications or "",
        "models": product.models or "",
        "images": [absolute_url(url) for url in (product.images or [])],
        "files": [
            {**f, "url": absolute_url(f.get("url"))}
            for f in (product.files or [])
        ],
        **timestamps(product),
    }
