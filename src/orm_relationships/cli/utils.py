"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from orm_relationships.core.errors import UnknownExampleError
from orm_relationships.core.services.database import DbSessionService
from orm_relationships.entities import ExampleDefinition, get_example
from orm_relationships.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()


def resolve_example(key: str) -> ExampleDefinition:
    """Look up an example, exiting with status 1 when it does not exist."""
    try:
        return get_example(key)
    except UnknownExampleError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        console.print("[dim]Run 'orm-relationships examples' to list them[/dim]")
        raise typer.Exit(1) from e


@contextmanager
def open_database(database_url: str | None = None) -> Iterator[DbSessionService]:
    """Yield a session service for ``database_url`` or the configured database."""
    db_config = get_config().database
    if database_url:
        db_config = db_config.model_copy(update={"url": database_url})
    service = DbSessionService(db_config)
    try:
        yield service
    finally:
        service.dispose()


def related_label(item: Any) -> str:
    """Short text for a related user or email."""
    if hasattr(item, "username"):
        return item.username
    return str(item.email)


def describe_related(entity: Any, *attributes: str) -> str:
    """Render the first relationship attribute ``entity`` maps, or ``-``."""
    for attribute in attributes:
        if not hasattr(type(entity), attribute):
            continue
        value = getattr(entity, attribute)
        if value is None:
            return "-"
        if isinstance(value, list):
            return ", ".join(related_label(item) for item in value) or "-"
        return related_label(value)
    return "-"


def users_table(users: list[Any]) -> Table:
    table = Table(title="Users", show_header=True, header_style="bold blue")
    table.add_column("Id", style="cyan", justify="right")
    table.add_column("Username", style="green")
    table.add_column("Password", style="dim")
    table.add_column("Emails", style="yellow")
    for user in users:
        table.add_row(
            str(user.id),
            user.username,
            user.password,
            describe_related(user, "emails", "email"),
        )
    return table


def emails_table(emails: list[Any]) -> Table:
    table = Table(title="Emails", show_header=True, header_style="bold blue")
    table.add_column("Id", style="cyan", justify="right")
    table.add_column("Email", style="green")
    table.add_column("Users", style="yellow")
    for email in emails:
        table.add_row(
            str(email.id), email.email, describe_related(email, "users", "user")
        )
    return table
