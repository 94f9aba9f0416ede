import click

from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.order_commands import (
    order_approve,
    order_expire,
    order_list,
    order_reject,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_fix_images,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.support_commands import (
    message_list,
    message_reply,
    notification_list,
    user_list,
)
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront shop administration."""
    if ctx.obj is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        ctx.obj = build_container(settings)
        ctx.call_on_close(ctx.obj.close)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def message() -> None:
    """Read and answer support messages."""


@cli.group()
def notification() -> None:
    """Inspect customer notifications."""


@cli.group()
def user() -> None:
    """Inspect registered users."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
@click.pass_obj
def serve(container, host: str, port: int) -> None:
    """Run the HTTP storefront."""
    import uvicorn

    from storefront.infrastructure.web.app import create_app

    uvicorn.run(create_app(container), host=host, port=port, log_config=None)


# Register subcommands
order.add_command(order_approve)
order.add_command(order_expire)
order.add_command(order_list)
order.add_command(order_reject)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_fix_images)
product.add_command(product_list)
product.add_command(product_update)
message.add_command(message_list)
message.add_command(message_reply)
notification.add_command(notification_list)
user.add_command(user_list)
