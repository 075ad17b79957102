"""Fixtures for end-to-end CLI logging tests.

Registers a test-only ``log-demo`` subcommand on the ``postdesk`` group that
logs on a project logger and on a third-party logger, so verbosity flags,
logger-level overrides and the flight recorder can be observed.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from postdesk.entrypoints.cli.main import postdesk

# pylint: disable=redefined-outer-name

DEMO_COMMAND = "log-demo"


@click.command()
def log_demo():
    """Log one message per level on 'postdesk.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("postdesk.demo")
    third_party = logging.getLogger("some.thirdparty")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party.debug("This is a debug-level third-party test message.")
    third_party.info("This is an info-level third-party test message.")
    third_party.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Attach ``log-demo`` to the ``postdesk`` group for one test."""
    postdesk.add_command(log_demo, name=DEMO_COMMAND)
    try:
        yield
    finally:
        postdesk.commands.pop(DEMO_COMMAND, None)
        # click-extra keeps its own section registry for help rendering
        for section in getattr(postdesk, "_sections", []):
            getattr(section, "commands", {}).pop(DEMO_COMMAND, None)
        if default_section := getattr(postdesk, "_default_section", None):
            default_section.commands.pop(DEMO_COMMAND, None)


@pytest.fixture
def runner(monkeypatch):
    """A CliRunner with no POSTDESK_* logging settings leaking in."""
    for name in (
        "POSTDESK_LOGGER_LEVEL",
        "POSTDESK_FLIGHT_RECORDER",
        "POSTDESK_FORCE_FLUSH_FLIGHT_RECORDER",
        "POSTDESK_LOG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def run_demo(registered_log_demo, runner, fs):
    """Invoke ``postdesk [ARGS...] log-demo`` and return the result."""

    def _run(*args: str, env: dict[str, str] | None = None):
        result = runner.invoke(postdesk, [*args, DEMO_COMMAND], env=env)
        assert result.exit_code == 0, result.output
        return result

    return _run
