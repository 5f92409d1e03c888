# ============================================================================
# FILE: streamify/cli.py
# Operator commands: schema creation and admin account maintenance
# ============================================================================
import click
from streamify.config import settings
from streamify.core.errors import ServiceError
from streamify.core.logging import setup_logging
from streamify.db.session import SessionLocal, init_db
from streamify.services.user_service import user_service


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """Streamify server administration"""
    setup_logging()


@cli.command("init-db")
def init_db_command():
    """Create all database tables."""
    init_db()
    click.echo("Database tables created")


@cli.command("set-admin")
@click.argument("email", required=False)
def set_admin(email):
    """
    Grant admin rights to an existing account.

    Defaults to ADMIN_EMAIL when no email is given.
    """
    email = email or settings.ADMIN_EMAIL
    if not email:
        raise click.UsageError("Pass an email or configure ADMIN_EMAIL")

    db = SessionLocal()
    try:
        user = user_service.promote_admin(db, email)
    except ServiceError as e:
        raise click.ClickException(e.message)
    finally:
        db.close()
    click.echo(f"{user.email} is now an admin")


@cli.command("reset-admin-password")
@click.argument("email", required=False)
@click.option("--name", default="Admin", show_default=True, help="Name used if the account is created")
@click.password_option(help="New password (min 8 characters)")
def reset_admin_password(email, name, password):
    """
    Set the admin account's password, creating the account if missing.

    Defaults to ADMIN_EMAIL when no email is given.
    """
    email = email or settings.ADMIN_EMAIL
    if not email:
        raise click.UsageError("Pass an email or configure ADMIN_EMAIL")

    db = SessionLocal()
    try:
        user = user_service.reset_admin_password(db, email, password, name=name)
    except ServiceError as e:
        raise click.ClickException(e.message)
    finally:
        db.close()
    click.echo(f"Password updated for admin {user.email}")


if __name__ == "__main__":
    cli()
