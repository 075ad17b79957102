"""Test the bootstrap function."""

from collections.abc import Callable

import pytest

from postdesk import config
from postdesk.adapters.id_generators import ULIDGenerator
from postdesk.adapters.password_hasher import WerkzeugPasswordHasher
from postdesk.adapters.unit_of_work import SqlAlchemyUnitOfWork
from postdesk.bootstrap import AppContainer, bootstrap, build_message_bus
from postdesk.interfaces.unit_of_work import AbstractUnitOfWork
from postdesk.service_layer import commands
from postdesk.service_layer.commands import Command

# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument
# pylint: disable=too-few-public-methods
# pylint: disable=magic-value-comparison


@pytest.fixture()
def setenvvar(monkeypatch):
    """Point POSTDESK_DB_URL at an in-memory database."""
    monkeypatch.setenv(config.DB_URL_ENVVAR, "sqlite:///:memory:")


class FakeUnitOfWork(AbstractUnitOfWork):
    """A test unit of work for testing purposes."""

    def __init__(self):
        self.committed = False

    def commit(self):
        self.committed = True

    def rollback(self):
        pass


class CustomCommand(Command):
    """A custom command for testing."""


class TestBuildMessageBus:
    """Tests for the build_message_bus function."""

    @staticmethod
    def test_injects_only_requested_dependencies():
        """Handlers receive the dependencies they name and nothing else."""
        uow = FakeUnitOfWork()
        seen = {}

        def sample_handler(cmd: CustomCommand, uow: FakeUnitOfWork, clock):
            seen.update(uow=uow, clock=clock)
            with uow:
                uow.commit()

        command_handlers: dict[type[Command], Callable[..., None]] = {
            CustomCommand: sample_handler,
        }

        bus = build_message_bus(uow, command_handlers, clock="tick", unused=object())
        bus.handle(CustomCommand())

        assert seen == {"uow": uow, "clock": "tick"}
        assert bus.uow.committed is True

    @staticmethod
    def test_returns_handler_result():
        """The bus hands back what the handler returns."""

        def sample_handler(cmd: CustomCommand):
            return 42

        bus = build_message_bus(FakeUnitOfWork(), {CustomCommand: sample_handler})
        assert bus.handle(CustomCommand()) == 42


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_reads_url_from_environment(setenvvar):
        """Without an argument the configured URL is used."""
        container = bootstrap()
        assert isinstance(container, AppContainer)
        assert str(container.engine.url) == "sqlite:///:memory:"
        assert isinstance(container.password_hasher, WerkzeugPasswordHasher)
        assert isinstance(container.token_id_generator, ULIDGenerator)

    @staticmethod
    def test_explicit_url_wins(setenvvar, tmp_path):
        url = f"sqlite:///{tmp_path / 'postdesk.db'}"
        assert str(bootstrap(url).engine.url) == url

    @staticmethod
    def test_missing_url(monkeypatch):
        monkeypatch.delenv(config.DB_URL_ENVVAR, raising=False)
        with pytest.raises(config.DatabaseUrlNotSetError):
            bootstrap()

    @staticmethod
    def test_each_bus_gets_a_fresh_unit_of_work(setenvvar):
        """Concurrent requests never share a unit of work."""
        container = bootstrap()
        first, second = container.message_bus(), container.message_bus()
        assert isinstance(first.uow, SqlAlchemyUnitOfWork)
        assert first.uow is not second.uow
        assert first.uow.engine is second.uow.engine

    @staticmethod
    def test_bus_runs_commands_end_to_end(sqlite_url):
        """A bootstrapped bus persists through the real adapters."""
        container = bootstrap(sqlite_url)
        created = container.message_bus().handle(commands.SeedCategories(("demo",)))
        with container.uow() as uow:
            assert uow.categories.list_all() == created
        container.engine.dispose()
