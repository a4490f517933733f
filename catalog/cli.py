"""Flask CLI commands for catalog link administration."""
import click


def _product_by_sku(sku):
    from catalog.extensions import db
    from catalog.models.product import Product

    product = db.session.execute(
        db.select(Product).filter_by(sku=sku)
    ).scalar_one_or_none()
    if product is None:
        raise click.ClickException(f"Unknown SKU: {sku}")
    return product


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all catalog tables."""
        from catalog.extensions import db

        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("link-children")
    @click.argument("parent_sku")
    @click.argument("child_skus", nargs=-1)
    @click.option("--clear", is_flag=True, help="Unlink every child of the parent.")
    def link_children(parent_sku, child_skus, clear):
        """Set the simple products linked to a configurable product."""
        from catalog.extensions import db
        from catalog.services.configurable_link import get_configurable_link_repository

        if not child_skus and not clear:
            raise click.UsageError("Give at least one CHILD_SKU, or --clear.")

        parent = _product_by_sku(parent_sku)
        if not parent.is_configurable:
            raise click.ClickException(f"{parent_sku} is not a configurable product")
        child_ids = [_product_by_sku(sku).entity_id for sku in child_skus]

        get_configurable_link_repository().save_links(parent, child_ids)
        db.session.commit()
        click.echo(f"Linked {len(child_ids)} children to {parent_sku}")

    @app.cli.command("children")
    @click.argument("parent_sku")
    def children(parent_sku):
        """List child product ids of a configurable product."""
        from catalog.services.configurable_link import (
            CHILDREN_GROUP,
            get_configurable_link_repository,
        )

        parent = _product_by_sku(parent_sku)
        ids = get_configurable_link_repository().get_children_ids(parent.entity_id)
        for child_id in sorted(ids[CHILDREN_GROUP]):
            click.echo(child_id)

    @app.cli.command("parents")
    @click.argument("child_sku")
    def parents(child_sku):
        """List configurable parents of a simple product."""
        from catalog.services.configurable_link import get_configurable_link_repository

        child = _product_by_sku(child_sku)
        for parent_id in get_configurable_link_repository().get_parent_ids_by_child(
            child.entity_id
        ):
            click.echo(parent_id)

    @app.cli.command("options")
    @click.argument("parent_sku")
    def options(parent_sku):
        """Show the option values reachable through a product's children."""
        from catalog.extensions import db
        from catalog.models.attribute import Attribute
        from catalog.models.super_attribute import SuperAttribute
        from catalog.services.configurable_link import get_configurable_link_repository

        repo = get_configurable_link_repository()
        parent = _product_by_sku(parent_sku)
        parent_key = parent.get_data(repo.resolve_link_field())
        attributes = db.session.execute(
            db.select(Attribute)
            .join(SuperAttribute, SuperAttribute.attribute_id == Attribute.attribute_id)
            .where(SuperAttribute.product_id == parent_key)
            .order_by(SuperAttribute.position)
        ).scalars().all()

        result = repo.get_configurable_options(parent, attributes)
        for attribute in attributes:
            click.echo(f"{attribute.attribute_code}:")
            for row in result[attribute.attribute_id]:
                label = row["option_title"] or "-"
                click.echo(f"  {row['sku']} (#{row['product_id']}): {label}")
