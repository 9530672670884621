from typing import Any, Dict
from emusite.extensions import db
from emusite.models.user import User
from emusite.domain.exceptions import InvariantViolation
from emusite.utils.transaction import transactional
from .content import ensure_unique


def _active_admin_count() -> int:
    return User.query.filter_by(role="admin", status="active").count()


def _is_last_active_admin(user: User) -> bool:
    return user.role == "admin" and user.is_active and _active_admin_count() <= 1


def create_user(data: Dict[str, Any]) -> User:
    email = data["email"].lower()
    ensure_unique(User, "email", email, message="Email already exists")

    user = User(
        email=email,
        name=data["name"],
        role=data.get("role", "user"),
        status=data.get("status", "active"),
    )
    user.set_password(data["password"])

    with transactional():
        db.session.add(user)

    return user


def update_user(user: User, data: Dict[str, Any]) -> User:
    data = dict(data)

    if data.get("email"):
        data["email"] = data["email"].lower()
        if data["email"] != user.email:
            ensure_unique(User, "email", data["email"], exclude_id=user.id, message="Email already exists")

    if _is_last_active_admin(user):
        if data.get("role") not in (None, "admin"):
            raise InvariantViolation("Cannot demote the last admin", field="role")
        if data.get("status") == "inactive":
            raise InvariantViolation("Cannot deactivate the last admin", field="status")

    password = data.pop("password", None)

    with transactional():
        for field, value in data.items():
            if value is not None:
                setattr(user, field, value)
        if password:
            user.set_password(password)

    return user


def delete_user(user: User) -> None:
    if _is_last_active_admin(user):
        raise InvariantViolation("Cannot delete the last admin user")

    with transactional():
        db.session.delete(user)
