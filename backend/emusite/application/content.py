from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy.exc import IntegrityError
from emusite.extensions import db
from emusite.domain.exceptions import InvariantViolation
from emusite.utils.transaction import transactional


def ensure_unique(model, field: str, value: Any, *, exclude_id: Optional[str] = None, message: Optional[str] = None, **scope) -> None:
    """
    Lookup-before-write uniqueness check. The database unique
    constraint still backs it for concurrent writers.
    """
    query = model.query.filter(getattr(model, field) == value)
    for name, scoped_value in scope.items():
        query = query.filter(getattr(model, name) == scoped_value)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)

    if query.first() is not None:
        raise InvariantViolation(message or f"{field.replace('_', ' ').capitalize()} already exists", field=field)


def create_entry(model, data: Dict[str, Any], *, unique_fields: Iterable[str] = ("slug",)):
    """
    Insert one row built from already-validated data.

    Edge cases handled:
    - Duplicate unique field (lookup first, IntegrityError as fallback)
    """
    for field in unique_fields:
        if data.get(field) is not None:
            ensure_unique(model, field, data[field])

    row = model(**data)
    try:
        with transactional():
            db.session.add(row)
    except IntegrityError as exc:
        raise InvariantViolation(_duplicate_message(unique_fields), field=_first(unique_fields)) from exc

    return row


def update_entry(row, data: Dict[str, Any], *, unique_fields: Iterable[str] = ("slug",)) -> List[str]:
    """
    Apply a partial update. Returns the names of the fields that changed;
    an empty list means nothing was written.
    """
    model = type(row)
    for field in unique_fields:
        if data.get(field) is not None and data[field] != getattr(row, field):
            ensure_unique(model, field, data[field], exclude_id=row.id)

    changed_fields: List[str] = []
    try:
        with transactional():
            for field, value in data.items():
                if getattr(row, field) != value:
                    setattr(row, field, value)
                    changed_fields.append(field)
    except IntegrityError as exc:
        raise InvariantViolation(_duplicate_message(unique_fields), field=_first(unique_fields)) from exc

    return changed_fields


def delete_entry(row) -> None:
    with transactional():
        db.session.delete(row)


def _first(fields):
    return next(iter(fields), None)


def _duplicate_message(fields):
    field = _first(fields)
    return f"{field.replace('_', ' ').capitalize()} already exists" if field else "Record already exists"
