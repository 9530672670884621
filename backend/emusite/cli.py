import click
from flask import current_app
from emusite.extensions import db
from emusite.models.user import User
from emusite.application.auth import purge_expired_sessions
from emusite.utils.transaction import transactional


def register_commands(app):
    @app.cli.command("seed-admin")
    def seed_admin():
        """Create the default admin account if no admin exists."""
        if User.query.filter_by(role="admin").first():
            click.echo("Admin user already exists")
            return

        user = User(
            email=current_app.config["DEFAULT_ADMIN_EMAIL"].lower(),
            name="Admin",
            role="admin",
            status="active",
        )
        user.set_password(current_app.config["DEFAULT_ADMIN_PASSWORD"])

        with transactional():
            db.session.add(user)

        click.echo(f"Created admin {user.email}")

    @app.cli.command("reset-admin")
    @click.option("--email", default=None, help="New login email for the admin.")
    @click.option("--password", default=None, help="New password for the admin.")
    def reset_admin(email, password):
        """Reset the first admin's email and password and reactivate it."""
        user = User.query.filter_by(role="admin").order_by(User.created_at.asc()).first()
        if user is None:
            raise click.ClickException("No admin user found; run seed-admin first")

        with transactional():
            user.email = (email or current_app.config["DEFAULT_ADMIN_EMAIL"]).lower()
            user.status = "active"
            user.set_password(password or current_app.config["DEFAULT_ADMIN_PASSWORD"])

        click.echo(f"Admin credentials reset for {user.email}")

    @app.cli.command("purge-sessions")
    def purge_sessions():
        """Delete expired login sessions."""
        count = purge_expired_sessions()
        click.echo(f"Removed {count} expired session(s)")
