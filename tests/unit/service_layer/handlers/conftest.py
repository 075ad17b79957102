"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from .fakes import FakeUoW, bootstrap_test_bus

if TYPE_CHECKING:
    from postdesk.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def make_test_uow() -> Callable[[], FakeUoW]:
    """Factory for the unit of work a test bus runs on. Classes can override this."""
    return FakeUoW


@pytest.fixture
def make_test_bus(make_test_uow) -> Callable[..., MessageBus]:
    """Factory to create a message bus over in-memory repositories."""

    def _make():
        return bootstrap_test_bus(make_test_uow())

    return _make
