"""Main CLI application module."""

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from orm_relationships.core.errors import SqlScriptNotFoundError
from orm_relationships.core.services.database import DbManageService
from orm_relationships.entities import list_examples
from orm_relationships.runtime.config import ConfigData, LoggingConfig
from orm_relationships.runtime.context import get_config, merge_configs, set_config
from orm_relationships.runtime.logging_setup import configure_logging

from .utils import (
    console,
    emails_table,
    open_database,
    resolve_example,
    users_table,
)

app = typer.Typer(
    help="🗂️  ORM relationship examples: schemas, fixtures and data",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

DATABASE_URL_OPTION = typer.Option(
    None,
    "--database-url",
    help="SQLAlchemy URL to use instead of the configured database",
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output, including every SQL script"
    ),
) -> None:
    """Load the configuration and set up logging before any command runs."""
    if verbose:
        override = ConfigData(logging=LoggingConfig(level="DEBUG"))
        set_config(merge_configs(get_config(), override))
    configure_logging()


@app.command(name="examples")
def list_all() -> None:
    """
    📋 List the examples with their mapping and fixture scripts.
    """
    examples = list_examples()

    table = Table(show_header=True, header_style="bold blue")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Example", style="green")
    table.add_column("Mapping")
    table.add_column("Owner", style="yellow", justify="center")
    table.add_column("Fixtures", style="dim")

    for example in examples:
        table.add_row(
            f"{example.number:03d}",
            example.slug,
            example.mapping,
            example.owner,
            ", ".join(example.fixtures()),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(examples)} examples[/dim]")


@app.command(name="init-db")
def init_db(
    example_key: str = typer.Argument(..., help="Example slug, label or number"),
    database_url: str | None = DATABASE_URL_OPTION,
) -> None:
    """
    🏗️  Drop and recreate the tables of an example.
    """
    example = resolve_example(example_key)

    with open_database(database_url) as db:
        if not db.health_check():
            console.print(f"[red]❌ Database is not reachable: {db.config.url}[/red]")
            raise typer.Exit(1)
        manager = DbManageService(db)
        try:
            manager.create_schema(example)
        except SQLAlchemyError as e:
            console.print(f"[red]❌ Could not create the schema: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e
        url = db.config.url

    console.print(
        f"[green]✅ Created tables for {example.label} in {url}[/green]"
    )
    console.print(f"[dim]Tables: {', '.join(manager.table_names(example))}[/dim]")


@app.command(name="load-fixture")
def load_fixture(
    example_key: str = typer.Argument(..., help="Example slug, label or number"),
    fixture: str = typer.Argument(..., help="Fixture script name, e.g. create-5-users"),
    database_url: str | None = DATABASE_URL_OPTION,
    no_schema: bool = typer.Option(
        False, "--no-schema", help="Keep the existing tables instead of recreating them"
    ),
) -> None:
    """
    📥 Run a fixture script for an example, recreating its tables first.
    """
    example = resolve_example(example_key)

    with open_database(database_url) as db:
        manager = DbManageService(db)
        try:
            if not no_schema:
                manager.create_schema(example)
            count = manager.load_fixture(example, fixture)
        except SqlScriptNotFoundError as e:
            console.print(f"[red]❌ {escape(str(e))}[/red]")
            console.print(
                f"[dim]Available fixtures: {', '.join(example.fixtures())}[/dim]"
            )
            raise typer.Exit(1) from e
        except SQLAlchemyError as e:
            console.print(f"[red]❌ Fixture {fixture} failed: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e

    console.print(
        f"[green]✅ Ran {count} statement(s) from {fixture} for {example.label}[/green]"
    )


@app.command()
def show(
    example_key: str = typer.Argument(..., help="Example slug, label or number"),
    fixture: str | None = typer.Option(
        None, "--fixture", "-f", help="Fixture script to load before showing the data"
    ),
    database_url: str = typer.Option(
        "sqlite:///:memory:",
        "--database-url",
        help="SQLAlchemy URL; an in-memory database by default",
    ),
) -> None:
    """
    🔎 Load an example into a database and print its users and emails.
    """
    example = resolve_example(example_key)

    console.print(
        Panel.fit(
            f"[bold green]{example.label}[/bold green]\n{example.title}\n"
            f"[dim]{example.mapping}[/dim]",
            border_style="green",
        )
    )

    with open_database(database_url) as db:
        manager = DbManageService(db)
        try:
            manager.create_schema(example)
            if fixture:
                manager.load_fixture(example, fixture)
        except SqlScriptNotFoundError as e:
            console.print(f"[red]❌ {escape(str(e))}[/red]")
            raise typer.Exit(1) from e

        with db.session_scope() as session:
            user_repository, email_repository = example.repositories(session)
            console.print(users_table(user_repository.find_all()))
            if email_repository is not None:
                console.print(emails_table(email_repository.find_all()))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
