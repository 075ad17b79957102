"""Global pytest fixtures for POSTDESK."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
]


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["postgres_engine", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)


@pytest.fixture
def request_logger() -> Iterator[logging.Logger]:
    """The ``werkzeug`` logger, restored to its previous state afterwards."""
    werkzeug_logger = logging.getLogger("werkzeug")
    saved = (
        werkzeug_logger.level,
        list(werkzeug_logger.filters),
        list(werkzeug_logger.handlers),
    )
    yield werkzeug_logger
    werkzeug_logger.setLevel(saved[0])
    werkzeug_logger.filters[:] = saved[1]
    werkzeug_logger.handlers[:] = saved[2]
