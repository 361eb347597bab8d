# storefront/cli.py
import click
import pandas as pd
from flask.cli import with_appcontext
from werkzeug.security import generate_password_hash

from .errors import StoreError
from .extensions import db
from .model import Product, User
from .product.routes import product_from_payload
from .seed_products import SEED_PRODUCTS
from .services import coupon_service, order_service
from .utils import clock

EXPORT_COLUMNS = [
    "title", "price", "originalPrice", "category", "brand", "image",
    "rating", "reviews", "description", "isNewArrival", "isBestSeller",
]


@click.command("create-admin")
@with_appcontext
@click.option("--email", required=True)
@click.option("--password", required=True)
@click.option("--name", required=True)
def create_admin(email, password, name):
    email = email.strip().lower()
    if User.query.filter_by(email=email).first():
        click.echo("Email already exists"); return
    u = User(email=email, name=name, password_hash=generate_password_hash(password), role="admin")
    db.session.add(u); db.session.commit()
    click.echo(f"Admin created: {u.id} {u.email}")


@click.command("create-coupon")
@with_appcontext
@click.argument("code")
@click.option("--type", "discount_type", type=click.Choice(["percent", "flat"]), required=True)
@click.option("--value", type=float, required=True)
@click.option("--min-order", type=float, default=0.0, show_default=True)
@click.option("--expires", default=None, help="ISO-8601 expiry, e.g. 2026-12-31T23:59:59Z")
@click.option("--inactive", is_flag=True, default=False)
def create_coupon(code, discount_type, value, min_order, expires, inactive):
    expiry = clock.parse_iso8601(expires) if expires else None
    if expires and expiry is None:
        raise click.BadParameter("expected an ISO-8601 datetime", param_hint="--expires")
    try:
        c = coupon_service.create_coupon(
            code, discount_type, value,
            min_order_value=min_order, is_active=not inactive, expiry_date=expiry,
        )
    except StoreError as e:
        raise click.ClickException(e.message)
    click.echo(f"Coupon created: {c.code} ({c.discount_type} {c.value:g})")


@click.command("seed-products")
@with_appcontext
def seed_products():
    """Replace the whole catalog with the bundled starter products."""
    Product.query.delete()
    for data in SEED_PRODUCTS:
        db.session.add(product_from_payload(data))
    db.session.commit()
    click.echo(f"{len(SEED_PRODUCTS)} products seeded")


@click.command("export-products")
@with_appcontext
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
def export_products(path):
    rows = [
        {k: p.as_api()[k] for k in EXPORT_COLUMNS}
        for p in Product.query.order_by(Product.id.asc()).all()
    ]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    df.to_csv(path, index=False)
    click.echo(f"{len(df)} products exported to {path}")


@click.command("import-products")
@with_appcontext
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def import_products(path):
    df = pd.read_csv(path)
    missing = [c for c in ("title", "price", "category", "brand", "image") if c not in df.columns]
    if missing:
        raise click.ClickException(f"missing columns: {', '.join(missing)}")

    added = 0
    for i, row in df.iterrows():
        data = {k: row[k] for k in df.columns if pd.notnull(row[k])}
        try:
            db.session.add(product_from_payload(data))
        except StoreError as e:
            db.session.rollback()
            raise click.ClickException(f"row {i + 2}: {e.message}")
        added += 1
    db.session.commit()
    click.echo(f"{added} products imported from {path}")


@click.command("advance-orders")
@with_appcontext
def advance_orders():
    """Apply the order status rule to every open order (for cron)."""
    n = order_service.sweep_open_orders(clock.utcnow())
    click.echo(f"{n} orders advanced")


def register_cli(app):
    for cmd in (create_admin, create_coupon, seed_products, export_products, import_products, advance_orders):
        app.cli.add_command(cmd)
