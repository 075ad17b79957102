"""Unit tests for postdesk.config."""

import io
from pathlib import Path

import pytest

from postdesk import config


def test_get_db_url(monkeypatch: pytest.MonkeyPatch):
    """The URL comes from POSTDESK_DB_URL."""
    monkeypatch.setenv(config.DB_URL_ENVVAR, "sqlite:///blog.db")
    assert config.get_db_url() == "sqlite:///blog.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_missing(monkeypatch: pytest.MonkeyPatch, value):
    """Unset or empty values raise DatabaseUrlNotSetError."""
    if value is None:
        monkeypatch.delenv(config.DB_URL_ENVVAR, raising=False)
    else:
        monkeypatch.setenv(config.DB_URL_ENVVAR, value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_build_alembic_config_points_at_packaged_scripts():
    """The script location is the packaged migrations directory."""
    stream = io.StringIO()
    cfg = config.build_alembic_config("sqlite:///blog.db", stdout=stream)
    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///blog.db"
    location = Path(cfg.get_main_option("script_location"))
    assert (location / "env.py").is_file()
    assert any((location / "versions").glob("*_create_blog_tables.py"))
    assert cfg.stdout is stream


def test_build_alembic_config_without_url():
    """Commands that never connect can run without a URL."""
    cfg = config.build_alembic_config()
    assert cfg.get_main_option("sqlalchemy.url") is None
