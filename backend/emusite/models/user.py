from werkzeug.security import generate_password_hash, check_password_hash
from emusite.extensions import db
from .base import BaseModel, utc_now

USER_ROLES = ("admin", "editor", "user")
USER_STATUSES = ("active", "inactive")


class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=False, default='')
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(50), nullable=False, default='user')
    status = db.Column(db.String(20), nullable=False, default='active')

    sessions = db.relationship(
        "Session",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    @property
    def is_active(self):
        return self.status == "active"

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)


class Session(BaseModel):
    """One row per issued login token; deleting it revokes the token."""
    __tablename__ = 'sessions'

    user_id = db.Column(db.String(36), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    jti = db.Column(db.String(64), unique=True, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)

    user = db.relationship("User", back_populates="sessions")

    @property
    def is_expired(self):
        return self.expires_at <= utc_now()
