"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.fix_product_images import FixProductImagesHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import DEFAULT_IMAGE
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--image", default=None, help="Image path or URL.")
@click.pass_obj
def product_add(container: Container, name: str, price: str, image: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=container.products)

    try:
        product = handler.handle(name=name, price=price, image=image)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=container.products).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>10}  Image")
    click.echo("-" * 80)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {p.price:>10}  {p.image}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--image", default=None, help="New image path or URL.")
@click.pass_obj
def product_update(
    container: Container,
    product_id: str,
    name: str | None,
    price: str | None,
    image: str | None,
) -> None:
    """Edit a product's name, price or image."""
    if name is None and price is None and image is None:
        raise click.UsageError("Nothing to update: pass --name, --price or --image.")

    handler = UpdateProductHandler(product_repo=container.products)

    try:
        product = handler.handle(product_id=product_id, name=name, price=price, image=image)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: str) -> None:
    """Remove a product from the catalog (past orders are unaffected)."""
    try:
        DeleteProductHandler(product_repo=container.products).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")


@click.command("fix-images")
@click.option(
    "--static-dir",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory the image paths are relative to (e.g. ./public).",
)
@click.option("--default-image", default=DEFAULT_IMAGE, show_default=True)
@click.pass_obj
def product_fix_images(container: Container, static_dir: Path, default_image: str) -> None:
    """Point products with a missing image file at the default image."""
    fixed = FixProductImagesHandler(product_repo=container.products).handle(
        static_dir, default_image
    )
    click.echo(f"Fixed {len(fixed)} product(s).")
