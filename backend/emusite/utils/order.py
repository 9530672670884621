from emusite.extensions import db


def next_order(model, order_field="order", start=0, **scope):
    """
    Order value for a new row appended to the given sibling scope:
    max(order) + 1, or `start` when the scope is empty.
    """
    column = getattr(model, order_field)
    query = db.session.query(db.func.max(column))
    for field, value in scope.items():
        attr = getattr(model, field)
        query = query.filter(attr.is_(None) if value is None else attr == value)

    current_max = query.scalar()
    return start if current_max is None else current_max + 1


def compact_order(query, order_field="order", start=1):
    """
    Re-assigns sequential order values (start..N) for a scoped query.
    """
    entity = query.column_descriptions[0]["entity"]
    items = query.order_by(getattr(entity, order_field).asc()).all()

    for index, item in enumerate(items, start=start):
        setattr(item, order_field, index)

    db.session.flush()
