"""CLI commands for support messages, notifications and users."""

from __future__ import annotations

import click

from storefront.application.accounts import ListUsersHandler
from storefront.application.list_notifications import ListNotificationsHandler
from storefront.application.support import ListMessagesHandler, ReplyToMessageHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("list")
@click.option("--unanswered", is_flag=True, default=False, help="Hide answered messages.")
@click.pass_obj
def message_list(container: Container, unanswered: bool) -> None:
    """Show the support inbox."""
    messages = ListMessagesHandler(message_repo=container.messages).handle()
    if unanswered:
        messages = [m for m in messages if m.reply is None]

    if not messages:
        click.echo("No messages.")
        return

    for m in messages:
        click.echo(f"[{m.created_at}] {m.sender}: {m.message}")
        if m.reply is not None:
            click.echo(f"    ↳ {m.reply}")


@click.command("reply")
@click.option("--user", "sender", required=True, help="Customer whose message to answer.")
@click.option("--text", required=True, help="Reply text.")
@click.pass_obj
def message_reply(container: Container, sender: str, text: str) -> None:
    """Answer the oldest unanswered message from a customer."""
    try:
        dto = ReplyToMessageHandler(message_repo=container.messages).handle(sender, text)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Replied to message {dto.id} from {dto.sender}.")


@click.command("list")
@click.option("--recipient", default=None, help="Only this recipient's notifications.")
@click.pass_obj
def notification_list(container: Container, recipient: str | None) -> None:
    """Show the notification log."""
    handler = ListNotificationsHandler(notification_repo=container.notifications)
    notifications = handler.handle(recipient)

    if not notifications:
        click.echo("No notifications.")
        return

    for n in notifications:
        click.echo(f"[{n.created_at}] {n.recipient}: {n.message}")


@click.command("list")
@click.pass_obj
def user_list(container: Container) -> None:
    """List registered users."""
    users = ListUsersHandler(user_repo=container.users).handle()

    if not users:
        click.echo("No users.")
        return

    for u in users:
        click.echo(f"{u.email:<40} {u.created_at}")
