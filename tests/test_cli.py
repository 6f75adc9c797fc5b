"""
Tests for the bookshelf CLI
"""

import json

from click.testing import CliRunner

from bookshelf import __version__
from bookshelf.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_books_list_table():
    result = CliRunner().invoke(cli, ["books", "list"])

    assert result.exit_code == 0, result.output
    assert "Found 8 book(s):" in result.output
    assert "Title: The Awakening" in result.output
    assert "Created: 1970-01-06T07:18:15.425Z" in result.output


def test_books_list_json():
    result = CliRunner().invoke(cli, ["books", "list", "--output-format", "json"])

    assert result.exit_code == 0, result.output
    rows = json.loads(result.output)
    assert [row["id"] for row in rows] == [1, 2, 3, 4, 5, 6, 7, 8]
    assert rows[7]["author"] == "Javier Marías"


def test_books_list_from_catalog_file(catalog_file):
    result = CliRunner().invoke(
        cli, ["books", "list", "--catalog", str(catalog_file), "--output-format", "json"]
    )

    assert result.exit_code == 0, result.output
    rows = json.loads(result.output)
    assert [row["id"] for row in rows] == [10, 11]
    assert rows[1]["createdAt"] == "1970-01-02T00:00:00.000Z"


def test_books_list_missing_catalog_exits_1(tmp_path):
    result = CliRunner().invoke(cli, ["books", "list", "--catalog", str(tmp_path / "none.yaml")])

    assert result.exit_code == 1


def test_books_get():
    result = CliRunner().invoke(cli, ["books", "get", "3"])

    assert result.exit_code == 0, result.output
    assert "Title: Meditations" in result.output


def test_books_get_unknown_exits_1():
    result = CliRunner().invoke(cli, ["books", "get", "abc"])

    assert result.exit_code == 1


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Book" in result.output
    assert "type Query" in result.output


class TestServe:
    """Tests for the serve command."""

    def test_passes_host_and_port_to_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "bookshelf.cli.uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs))
        )

        result = CliRunner().invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "4100"])

        assert result.exit_code == 0, result.output
        assert len(calls) == 1
        app, kwargs = calls[0]
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 4100
        assert kwargs["log_level"] == "info"

        from bookshelf.api.app import app as default_app

        assert app is default_app

    def test_default_port(self, monkeypatch):
        calls = []
        monkeypatch.setattr("bookshelf.cli.uvicorn.run", lambda app, **kwargs: calls.append(kwargs))

        result = CliRunner().invoke(cli, ["serve"])

        assert result.exit_code == 0, result.output
        assert calls[0]["port"] == 4000

    def test_reload_uses_import_string(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "bookshelf.cli.uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs))
        )

        result = CliRunner().invoke(cli, ["serve", "--reload", "--workers", "3"])

        assert result.exit_code == 0, result.output
        app, kwargs = calls[0]
        assert app == "bookshelf.api.app:app"
        assert kwargs["reload"] is True
        assert kwargs["workers"] == 1

    def test_startup_failure_exits_1(self, monkeypatch):
        def fail(app, **kwargs):
            raise OSError("address already in use")

        monkeypatch.setattr("bookshelf.cli.uvicorn.run", fail)

        result = CliRunner().invoke(cli, ["serve"])

        assert result.exit_code == 1
