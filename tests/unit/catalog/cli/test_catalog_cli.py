"""Unit tests for the catalog CLI commands."""

from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from src.catalog.cli import app
from src.catalog.core.services import DbSessionService, ProductService
from src.catalog.entities import Product


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_database(database_service: DbSessionService):
    """Point the CLI at the test engine without letting it dispose the pool."""
    stand_in = Mock(get_session=database_service.get_session)
    with patch(
        "src.catalog.cli.catalog_commands.DbSessionService", return_value=stand_in
    ):
        yield stand_in


class TestProductCommands:
    def test_add_and_list(self, runner: CliRunner):
        added = runner.invoke(app, ["products", "add", "acme"])
        listed = runner.invoke(app, ["products", "list"])

        assert added.exit_code == 0
        assert "Created product 'acme'" in added.output
        assert listed.exit_code == 0
        assert "acme" in listed.output

    def test_duplicate_exits_with_error(self, runner: CliRunner):
        runner.invoke(app, ["products", "add", "acme"])

        result = runner.invoke(app, ["products", "add", "acme"])

        assert result.exit_code == 1
        assert "Error creating new product" in result.output

    def test_delete_with_force(self, runner: CliRunner, database_service: DbSessionService):
        runner.invoke(app, ["products", "add", "acme"])

        result = runner.invoke(app, ["products", "delete", "acme", "--force"])

        assert result.exit_code == 0
        with database_service.session_scope() as session:
            assert ProductService(session).list_all() == []

    def test_empty_list(self, runner: CliRunner):
        result = runner.invoke(app, ["products", "list"])

        assert result.exit_code == 0
        assert "No products found" in result.output


class TestReleaseAndImageCommands:
    def test_release_add_for_unknown_product(self, runner: CliRunner):
        result = runner.invoke(app, ["releases", "add", "ghost", "v1"])

        assert result.exit_code == 1
        assert 'Product "ghost" not found' in result.output

    def test_release_and_image_flow(
        self, runner: CliRunner, database_service: DbSessionService
    ):
        with database_service.session_scope() as session:
            ProductService(session).create(Product(name="acme"))

        release = runner.invoke(
            app, ["releases", "add", "acme", "v1", "--tarball", "http://dl/v1.tgz"]
        )
        image = runner.invoke(
            app, ["images", "add", "docker", "acme", "acme:1", "--release-id", "1"]
        )
        listed = runner.invoke(app, ["releases", "list", "--product", "acme"])

        assert release.exit_code == 0
        assert image.exit_code == 0
        assert "linked to 1 release(s)" in image.output
        assert "v1" in listed.output
