"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from postdesk import config
from postdesk.adapters.db.engine import make_engine
from postdesk.adapters.id_generators import ULIDGenerator
from postdesk.adapters.password_hasher import WerkzeugPasswordHasher
from postdesk.adapters.unit_of_work import SqlAlchemyUnitOfWork
from postdesk.service_layer.handlers import COMMAND_HANDLERS
from postdesk.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from postdesk.interfaces.id_generator import IdGenerator
    from postdesk.interfaces.password_hasher import PasswordHasher
    from postdesk.interfaces.unit_of_work import AbstractUnitOfWork
    from postdesk.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Long-lived application wiring.

    Holds only what is safe to share between concurrent requests. Each call
    to `message_bus()` or `uow()` builds a fresh unit of work, so requests
    never share a connection or a transaction.
    """

    uow_factory: Callable[[], AbstractUnitOfWork]
    password_hasher: PasswordHasher
    token_id_generator: IdGenerator
    command_handlers: Mapping[type[Command], Callable[..., Any]] = field(
        default_factory=lambda: dict(COMMAND_HANDLERS)
    )
    engine: Engine | None = None

    def uow(self) -> AbstractUnitOfWork:
        """Return a new unit of work."""
        return self.uow_factory()

    def message_bus(self) -> MessageBus:
        """Return a message bus bound to a new unit of work."""
        return build_message_bus(
            self.uow(),
            self.command_handlers,
            password_hasher=self.password_hasher,
            token_id_generator=self.token_id_generator,
        )


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., Any]],
    **extra_dependencies: object,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, **extra_dependencies}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Wire the SQLAlchemy-backed application.

    Args:
        db_url: Database URL; defaults to `POSTDESK_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    engine = make_engine(db_url or config.get_db_url())
    return AppContainer(
        uow_factory=lambda: SqlAlchemyUnitOfWork(engine),
        password_hasher=WerkzeugPasswordHasher(),
        token_id_generator=ULIDGenerator(),
        engine=engine,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
