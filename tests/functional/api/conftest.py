"""Fixtures for exercising the JSON API through Flask's test client.

The app runs over a migrated, file-backed SQLite database with a cheap
password hashing method.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import pytest

from postdesk.adapters.id_generators import ULIDGenerator
from postdesk.adapters.password_hasher import WerkzeugPasswordHasher
from postdesk.adapters.unit_of_work import SqlAlchemyUnitOfWork
from postdesk.bootstrap import AppContainer
from postdesk.entrypoints.http import create_app
from postdesk.service_layer import commands

if TYPE_CHECKING:
    from flask import Flask
    from flask.testing import FlaskClient
    from sqlalchemy.engine import Engine

# pylint: disable=redefined-outer-name

FAST_HASH_METHOD = "pbkdf2:sha256:1000"
PASSWORD = "password1"


@pytest.fixture
def container(sqlite_engine_file: Engine) -> AppContainer:
    return AppContainer(
        uow_factory=lambda: SqlAlchemyUnitOfWork(sqlite_engine_file),
        password_hasher=WerkzeugPasswordHasher(FAST_HASH_METHOD),
        token_id_generator=ULIDGenerator(),
        engine=sqlite_engine_file,
    )


@pytest.fixture
def app(container: AppContainer) -> Flask:
    flask_app = create_app(container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def categories(container: AppContainer) -> dict[str, int]:
    """Seed the default categories; map name -> id."""
    created = container.message_bus().handle(commands.SeedCategories())
    return {category.name: category.id for category in created}


@pytest.fixture
def register(client: FlaskClient) -> Callable[..., dict[str, str]]:
    """Register a user through the API and return bearer auth headers."""

    def _register(name: str, email: str | None = None) -> dict[str, str]:
        email = email or f"{name.lower()}@example.com"
        resp = client.post(
            "/api/v1/register",
            json={"name": name, "email": email, "password": PASSWORD},
        )
        assert resp.status_code == 201, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}

    return _register


@pytest.fixture
def ana(register) -> dict[str, str]:
    return register("Ana")


@pytest.fixture
def ben(register) -> dict[str, str]:
    return register("Ben")


@pytest.fixture
def create_post(client: FlaskClient, categories: dict[str, int]):
    """POST a post with sensible defaults and return the JSON body."""

    def _create(headers: dict[str, str], **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": "Hello World",
            "excerpt": "Short",
            "content": "Body",
            "categories": [categories["noticias"]],
        }
        payload.update(overrides)
        resp = client.post("/api/v1/posts", json=payload, headers=headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _create
