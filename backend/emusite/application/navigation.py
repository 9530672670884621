from collections import defaultdict
from typing import Any, Dict, List, Optional
from werkzeug.exceptions import NotFound
from emusite.extensions import db
from emusite.models.navigation import NavigationItem
from emusite.domain.exceptions import InvariantViolation
from emusite.normalizers.navigation import normalize_navigation_item
from emusite.utils.order import next_order, compact_order
from emusite.utils.transaction import transactional


def build_navigation_tree(items: List[NavigationItem], parent_id: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Nest a flat list of items under `parent_id`, siblings sorted by order.

    Only items reachable from `parent_id` end up in the tree; an item whose
    parent is not part of `items` is dropped.
    """
    by_parent = defaultdict(list)
    for item in items:
        by_parent[item.parent_id].append(item)

    def branch(node_id, visited):
        children = sorted(by_parent.get(node_id, []), key=lambda i: (i.order, i.created_at))
        return [
            normalize_navigation_item(child, children=branch(child.id, visited | {child.id}))
            for child in children
            if child.id not in visited
        ]

    return branch(parent_id, frozenset())


def navigation_tree(nav_type: str, parent_id: Optional[str] = None, active_only: bool = False) -> List[Dict[str, Any]]:
    query = NavigationItem.query.filter_by(type=nav_type)
    if active_only:
        query = query.filter_by(active=True)
    return build_navigation_tree(query.all(), parent_id)


def _ensure_parent(parent_id: Optional[str], nav_type: str, item_id: Optional[str] = None) -> None:
    if not parent_id:
        return
    if parent_id == item_id:
        raise InvariantViolation("An item cannot be its own parent", field="parent_id")

    parent = db.session.get(NavigationItem, parent_id)
    if parent is None:
        raise InvariantViolation("Parent item not found", field="parent_id")
    if parent.type != nav_type:
        raise InvariantViolation("Parent item belongs to another menu", field="parent_id")


def _ensure_acyclic(item: NavigationItem) -> None:
    """Walk up from `item` using in-session state; meeting `item` again means a cycle."""
    seen = {item.id}
    parent_id = item.parent_id
    while parent_id:
        if parent_id in seen:
            raise InvariantViolation(
                "An item cannot be moved under itself or its descendants",
                field="parent_id",
            )
        seen.add(parent_id)
        parent = db.session.get(NavigationItem, parent_id)
        parent_id = parent.parent_id if parent else None


def create_navigation_item(data: Dict[str, Any]) -> NavigationItem:
    """New items are appended after their siblings (first sibling gets 0)."""
    parent_id = data.get("parent_id") or None
    _ensure_parent(parent_id, data["type"])

    item = NavigationItem(
        label=data["label"],
        url=data["url"],
        type=data["type"],
        active=data.get("active", True),
        parent_id=parent_id,
        order=next_order(NavigationItem, start=0, type=data["type"], parent_id=parent_id),
    )

    with transactional():
        db.session.add(item)

    return item


def update_navigation_item(item: NavigationItem, data: Dict[str, Any]) -> NavigationItem:
    if "parent_id" in data:
        data = {**data, "parent_id": data["parent_id"] or None}
        _ensure_parent(data["parent_id"], data.get("type", item.type), item.id)

    with transactional():
        for field, value in data.items():
            setattr(item, field, value)
        _ensure_acyclic(item)

    return item


def delete_navigation_item(item: NavigationItem) -> None:
    """
    Children move up to the deleted item's parent; the remaining
    siblings at that level are renumbered from 0.
    """
    parent_id, nav_type = item.parent_id, item.type

    with transactional():
        NavigationItem.query.filter_by(parent_id=item.id).update(
            {"parent_id": parent_id}, synchronize_session="fetch"
        )
        db.session.delete(item)
        db.session.flush()

        siblings = NavigationItem.query.filter(
            NavigationItem.type == nav_type,
            NavigationItem.parent_id.is_(None) if parent_id is None
            else NavigationItem.parent_id == parent_id,
        )
        compact_order(siblings, start=0)


def reorder_navigation(positions: List[Dict[str, Any]]) -> None:
    """
    Apply {id, order, parent_id} to every listed item in one transaction.
    An unknown id or a resulting cycle writes nothing.
    """
    ids = [p["id"] for p in positions]
    items = {
        i.id: i for i in NavigationItem.query.filter(NavigationItem.id.in_(ids)).all()
    }

    with transactional():
        for position in positions:
            item = items.get(position["id"])
            if item is None:
                raise NotFound(f"Navigation item not found: {position['id']}")
            if position.get("parent_id") == item.id:
                raise InvariantViolation("An item cannot be its own parent", field="parent_id")

            item.order = position["order"]
            item.parent_id = position.get("parent_id") or None

        for item in items.values():
            _ensure_acyclic(item)
