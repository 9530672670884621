def normalize_navigation_item(item, children=None):
    data = {
        "id": item.id,
        "label": item.label,
        "url": item.url,
        "type": item.type,
        "active": item.active,
        "order": item.order,
        "parent_id": item.parent_id,
    }

    if children is not None:
        data["children"] = children

    return data
