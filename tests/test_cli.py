"""Tests for the command line entry point."""

import sys

import pytest
from sqlalchemy import create_engine, inspect

from roster.__main__ import main


class TestCli:
    """Tests for the roster CLI."""

    def test_no_command_prints_help(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["roster"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "usage: roster" in capsys.readouterr().out

    def test_init_db_creates_tables(self, monkeypatch, database_url):
        monkeypatch.setattr(sys, "argv", ["roster", "init-db"])

        main()

        engine = create_engine(database_url)
        try:
            assert "players" in inspect(engine).get_table_names()
        finally:
            engine.dispose()

    def test_server_uses_settings(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["roster", "server", "--port", "9000"])
        calls = {}

        def fake_run(app, **kwargs):
            calls["app"] = app
            calls.update(kwargs)

        monkeypatch.setattr("uvicorn.run", fake_run)

        main()

        assert calls["app"] == "roster.server.app:app"
        assert calls["host"] == "localhost"
        assert calls["port"] == 9000
