from typing import Optional, Tuple
from flask import current_app
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from emusite.extensions import db
from emusite.models.base import utc_now
from emusite.models.user import User, Session
from emusite.utils.transaction import transactional


def authenticate(email: str, password: str) -> Optional[User]:
    """
    None for an unknown email, a wrong password or an inactive account;
    callers answer all three with the same 401.
    """
    user = User.query.filter_by(email=email.lower()).first()

    if user is None or not user.check_password(password):
        current_app.logger.info("Failed login for %s", email)
        return None

    if not user.is_active:
        current_app.logger.info("Login refused for inactive account %s", email)
        return None

    return user


def start_session(user: User) -> Tuple[str, Session]:
    """Issue a signed token and persist the Session row that keeps it valid."""
    token = create_access_token(
        identity=user.id,
        additional_claims={"role": user.role, "email": user.email},
    )
    claims = decode_token(token)

    session = Session(
        user_id=user.id,
        jti=claims["jti"],
        expires_at=utc_now() + current_app.config["JWT_ACCESS_TOKEN_EXPIRES"],
    )

    with transactional():
        db.session.add(session)

    current_app.logger.info("User %s logged in", user.email)
    return token, session


def end_session(token: Optional[str]) -> bool:
    """
    Delete the Session row behind `token`. Expired tokens still end
    their session. Returns False when there was nothing to end.
    """
    if not token:
        return False

    try:
        claims = decode_token(token, allow_expired=True)
    except (JWTExtendedException, PyJWTError) as exc:
        current_app.logger.info("Logout with unreadable token: %s", exc)
        return False

    with transactional():
        deleted = Session.query.filter_by(jti=claims["jti"]).delete()

    return bool(deleted)


def purge_expired_sessions() -> int:
    with transactional():
        return Session.query.filter(Session.expires_at <= utc_now()).delete()
