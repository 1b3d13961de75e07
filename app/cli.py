import os
import click
from flask import current_app
from flask.cli import with_appcontext
from flask_migrate import upgrade as alembic_upgrade, stamp as alembic_stamp, migrate as alembic_migrate
from models import db
from models.shopkeeper import Shopkeeper, ShopkeeperSession
from models.item import Item
from models.order import Order
from app.auth.authenticator import hash_password
from app.auth.sessions import purge_expired_sessions
from app.utils.db import transactional

DEMO_SHOPKEEPERS = [
    {
        "name": "Saurav Mehta",
        "email": "saurav.mehta@gmail.com",
        "phone": "9876543210",
        "shop_name": "Mehta Electronics",
        "location": "Rajpur Road",
        "city": "Dehradun",
        "gst_number": "09ABCDE1234F1Z5",
        "established_year": 2018,
        "is_verified": True,
    },
    {
        "name": "Aditi Sharma",
        "email": "aditi.sharma@gmail.com",
        "phone": "9812345678",
        "shop_name": "Aditi Fashion Hub",
        "location": "Connaught Place",
        "city": "New Delhi",
        "gst_number": "07PQRSF7890L2K3",
        "established_year": 2020,
        "is_verified": False,
    },
    {
        "name": "Rohit Verma",
        "email": "rohit.verma@gmail.com",
        "phone": "9901234567",
        "shop_name": "Verma Supermart",
        "location": "Civil Lines",
        "city": "Agra",
        "gst_number": "09LMNOP2345J7Z9",
        "established_year": 2015,
        "is_verified": True,
    },
]


def _assert_safe_for_upgrade():
    # Prevent accidental prod upgrades unless explicitly allowed
    env = (current_app.config.get("ENV") or "").lower()
    app_env = (os.getenv("APP_ENV") or "").lower()
    if app_env == "production" or env == "production":
        if (os.getenv("ALLOW_DB_MIGRATIONS") or "").lower() not in ("1", "true", "yes"):
            raise click.ClickException("Refusing to run DB migration in production without ALLOW_DB_MIGRATIONS=true")


@click.command("db-migrate-safe")
@click.option("-m", "--message", default="auto migration", help="Migration message")
@with_appcontext
def db_migrate_safe(message):
    """Generate a new migration script from current models."""
    alembic_migrate(message=message)
    click.echo("Migration script generated.")


@click.command("db-upgrade-safe")
@with_appcontext
def db_upgrade_safe():
    """Apply migrations to the configured database."""
    _assert_safe_for_upgrade()
    alembic_upgrade()
    click.echo("Database upgraded.")


@click.command("db-stamp-safe")
@click.option("--revision", default="head", help="Revision to stamp, default 'head'")
@with_appcontext
def db_stamp_safe(revision):
    """Mark the database at a given revision without running migrations."""
    _assert_safe_for_upgrade()
    alembic_stamp(revision=revision)
    click.echo(f"Database stamped at {revision}.")


@click.command("seed-shopkeepers")
@click.option("--password", default="changeme123", help="Password given to every demo account")
@with_appcontext
def seed_shopkeepers(password):
    """Replace all shopkeepers, their items and orders with the demo accounts."""
    _assert_safe_for_upgrade()
    with transactional("Failed to seed shopkeepers"):
        Order.query.delete()
        Item.query.delete()
        ShopkeeperSession.query.delete()
        Shopkeeper.query.delete()
        for data in DEMO_SHOPKEEPERS:
            db.session.add(Shopkeeper(password_hash=hash_password(password), **data))
    click.echo(f"Seeded {len(DEMO_SHOPKEEPERS)} shopkeepers.")


@click.command("purge-sessions")
@with_appcontext
def purge_sessions():
    """Delete expired shopkeeper sessions."""
    with transactional("Failed to purge sessions"):
        removed = purge_expired_sessions()
    click.echo(f"Removed {removed} expired sessions.")


def register_cli(app):
    app.cli.add_command(db_migrate_safe)
    app.cli.add_command(db_upgrade_safe)
    app.cli.add_command(db_stamp_safe)
    app.cli.add_command(seed_shopkeepers)
    app.cli.add_command(purge_sessions)
