"""Interface for the category store."""

from __future__ import annotations

import abc
from collections.abc import Collection

from postdesk.domain.model import Category


class CategoryRepository(abc.ABC):
    """Categories posts can be tagged with."""

    @abc.abstractmethod
    def find_missing(self, category_ids: Collection[int]) -> set[int]:
        """Return the ids from `category_ids` that do not exist."""

    @abc.abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return the category called `name`, or ``None``."""

    @abc.abstractmethod
    def add(self, name: str) -> Category:
        """Insert a category and return it with its new id."""

    @abc.abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category ordered by id."""
