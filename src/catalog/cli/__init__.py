"""Main CLI application module."""

import typer

from .catalog_commands import images_app, products_app, releases_app, run_init_db, serve

# Create the main CLI application
app = typer.Typer(
    help="Release catalog CLI - serve the API and manage catalog entries",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("serve")(serve)
app.command("init-db")(run_init_db)

# Register command groups
app.add_typer(products_app, name="products")
app.add_typer(releases_app, name="releases")
app.add_typer(images_app, name="images")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
