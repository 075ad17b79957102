"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from postdesk.adapters.id_generators import SimpleIdGenerator, ULIDGenerator
from postdesk.interfaces.id_generator import IdGenerator


def _build(kind: str) -> IdGenerator:
    match kind:
        case "ulid":
            return ULIDGenerator()
        case "simple":
            return SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {kind}")


@pytest.fixture(params=["ulid", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for each backend.

    Supported params:
      - `"ulid"` → ULIDGenerator (access-token ids in production)
      - `"simple"` → SimpleIdGenerator (tests)
    """
    yield _build(request.param)


@pytest.fixture(params=["ulid", "simple"])
def monotonic_id_generators(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield IdGenerators that promise lexicographically increasing ids."""
    yield _build(request.param)
