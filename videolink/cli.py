"""Flask CLI commands for catalog and video link admin."""
import click
from flask import current_app


def _store():
    from videolink.extensions import db
    from videolink.services.video_link_store import VideoLinkStore

    return VideoLinkStore(db.session)


def _product_by_sku(sku):
    from videolink.models.product import Product

    product = Product.query.filter_by(sku=sku).first()
    if not product:
        raise click.ClickException(f"No product with SKU {sku}")
    return product


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        from videolink.extensions import db

        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("seed-demo")
    def seed_demo():
        """Seed colour options and a configurable demo product (idempotent)."""
        from videolink.extensions import db
        from videolink.models.product import Product
        from videolink.services.option_source import add_option

        attribute = current_app.config["VIDEO_LINK_ATTRIBUTE"]
        for label in ("Red", "Blue", "Green", "Black"):
            add_option(attribute, label)

        if Product.query.filter_by(sku="DEMO-TEE").first():
            click.echo("Demo product already exists — skipping.")
            return

        db.session.add(
            Product(sku="DEMO-TEE", name="Demo T-Shirt", type_id="configurable")
        )
        db.session.commit()
        click.echo("Seeded demo options and product DEMO-TEE.")

    @app.cli.command("add-option")
    @click.argument("attribute_code")
    @click.argument("label")
    def add_option_cmd(attribute_code, label):
        """Add an option to an attribute (e.g. color Red)."""
        from videolink.services.option_source import add_option

        option = add_option(attribute_code, label)
        click.echo(f"{attribute_code} option {option.id}: {option.label}")

    @app.cli.command("create-product")
    @click.option("--sku", required=True)
    @click.option("--name", required=True)
    @click.option("--configurable", is_flag=True, help="Offer selectable options")
    def create_product(sku, name, configurable):
        """Create a product directly (for testing)."""
        from videolink.extensions import db
        from videolink.models.product import Product

        product = Product(
            sku=sku,
            name=name,
            type_id="configurable" if configurable else "simple",
        )
        db.session.add(product)
        db.session.commit()
        click.echo(f"Created: {product.id} — {sku} — {product.type_id}")

    @app.cli.command("set-video-link")
    @click.argument("sku")
    @click.argument("option_id", type=int)
    @click.argument("url")
    def set_video_link(sku, option_id, url):
        """Set the video link of one option of a product."""
        product = _product_by_sku(sku)
        _store().set_link(product.id, option_id, url, admin="cli")
        click.echo(f"{sku}: option {option_id} -> {url}")

    @app.cli.command("show-video-links")
    @click.argument("sku")
    def show_video_links(sku):
        """List the video links stored for a product."""
        from videolink.services.option_source import get_attribute_options

        product = _product_by_sku(sku)
        links = _store().get(product.id)
        if not links:
            click.echo(f"{sku}: no video links")
            return

        labels = {
            option.id: option.label
            for option in get_attribute_options(
                current_app.config["VIDEO_LINK_ATTRIBUTE"]
            )
        }
        click.echo(f"{sku}:")
        for option_id, url in sorted(links.items(), key=lambda kv: str(kv[0])):
            click.echo(f"  {labels.get(option_id, option_id)}: {url}")
