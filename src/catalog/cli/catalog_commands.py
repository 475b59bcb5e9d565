"""Catalog management CLI commands.

Every command opens one session, runs a single service operation and prints
the outcome. Catalog errors end the command with exit code 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table
from sqlmodel import Session

from src.catalog.core.errors import CatalogError
from src.catalog.core.services import (
    DbSessionService,
    ImageService,
    ProductService,
    ReleaseService,
)
from src.catalog.entities.image import Image
from src.catalog.entities.product import Product
from src.catalog.entities.release import Release
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import init_db

console = Console()

products_app = typer.Typer(help="Manage products")
releases_app = typer.Typer(help="Manage releases")
images_app = typer.Typer(help="Manage images")


@contextmanager
def catalog_session() -> Iterator[Session]:
    """Yield a session and turn catalog errors into a failed exit."""
    database_service = DbSessionService()
    session = database_service.get_session()
    try:
        yield session
    except CatalogError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        session.close()
        database_service.dispose()


def _fmt(value: object) -> str:
    return "-" if value is None else str(value)


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
) -> None:
    """Run the catalog API with uvicorn."""
    import uvicorn

    from src.catalog.api.http.app import create_app
    from src.catalog.api.utils.app_startup import configure_logging

    configure_logging()
    config = get_config()
    uvicorn.run(
        create_app(),
        host=host or config.app.host,
        port=port or config.app.port,
        access_log=False,  # We handle access logging in middleware
    )


def run_init_db() -> None:
    """Create all catalog tables."""
    init_db()
    console.print("[green]✅ Database tables created[/green]")


@products_app.command("list")
def list_products() -> None:
    """List all products."""
    with catalog_session() as session:
        products = ProductService(session).list_all()

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Created", style="magenta")
    table.add_column("Updated", style="magenta")
    for product in products:
        table.add_row(
            _fmt(product.id), product.name, _fmt(product.created_at), _fmt(product.updated_at)
        )
    console.print(table)


@products_app.command("add")
def add_product(name: str = typer.Argument(..., help="Unique product name")) -> None:
    """Add a new product."""
    with catalog_session() as session:
        product = ProductService(session).create(Product(name=name))
    console.print(f"[green]✅ Created product '{product.name}' (id {product.id})[/green]")


@products_app.command("delete")
def delete_product(
    name: str = typer.Argument(..., help="Product to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Delete a product together with its releases."""
    if not force and not Confirm.ask(
        f"Delete product '{name}' and all of its releases?"
    ):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=0)

    with catalog_session() as session:
        ProductService(session).delete(name)
    console.print(f"[green]✅ Deleted product '{name}'[/green]")


@releases_app.command("list")
def list_releases(
    product: str | None = typer.Option(
        None, "--product", "-p", help="Only list releases of this product"
    ),
) -> None:
    """List releases, optionally limited to one product."""
    with catalog_session() as session:
        service = ReleaseService(session)
        releases = service.list_for_product(product) if product else service.list_all()

    if not releases:
        console.print("[yellow]No releases found[/yellow]")
        return

    table = Table(title=f"Releases of '{product}'" if product else "Releases")
    table.add_column("ID", style="cyan")
    table.add_column("Product ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Tarball", style="blue")
    for release in releases:
        table.add_row(
            _fmt(release.id), _fmt(release.product_id), release.name, _fmt(release.tarball_link)
        )
    console.print(table)


@releases_app.command("add")
def add_release(
    product: str = typer.Argument(..., help="Owning product name"),
    name: str = typer.Argument(..., help="Release name, unique within the product"),
    tarball: str | None = typer.Option(None, "--tarball", "-t", help="Tarball URL"),
) -> None:
    """Add a release to a product."""
    with catalog_session() as session:
        owner = ProductService(session).get(product)
        release = ReleaseService(session).create(
            Release(product_id=owner.id, name=name, tarball_link=tarball)
        )
    console.print(
        f"[green]✅ Created release '{release.name}' for '{product}' (id {release.id})[/green]"
    )


@images_app.command("list")
def list_images() -> None:
    """List all images."""
    with catalog_session() as session:
        images = ImageService(session).list_all()

    if not images:
        console.print("[yellow]No images found[/yellow]")
        return

    table = Table(title="Images")
    table.add_column("ID", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Software", style="green")
    table.add_column("Image", style="blue")
    for image in images:
        table.add_row(_fmt(image.id), image.image_type, image.software_name, image.image_name)
    console.print(table)


@images_app.command("add")
def add_image(
    image_type: str = typer.Argument(..., help="Image type, e.g. docker"),
    software_name: str = typer.Argument(..., help="Software the image packages"),
    image_name: str = typer.Argument(..., help="Image name"),
    release_ids: list[int] | None = typer.Option(
        None, "--release-id", "-r", help="Release to link; repeat for several"
    ),
) -> None:
    """Add an image, optionally linking it to releases."""
    with catalog_session() as session:
        image = ImageService(session).create(
            Image(
                image_type=image_type,
                software_name=software_name,
                image_name=image_name,
                release_ids=release_ids or None,
            )
        )
    linked = len(image.releases or [])
    console.print(
        f"[green]✅ Created image '{image.image_name}' (id {image.id}), "
        f"linked to {linked} release(s)[/green]"
    )
