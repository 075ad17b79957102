"""In-memory CategoryRepository."""

from __future__ import annotations

from collections.abc import Collection

from postdesk.domain.model import Category
from postdesk.interfaces.category_repository import CategoryRepository

from .store import InMemoryBlogData


class InMemoryCategoryRepository(CategoryRepository):
    """CategoryRepository backed by `InMemoryBlogData`."""

    def __init__(self, data: InMemoryBlogData) -> None:
        self._data = data

    def find_missing(self, category_ids: Collection[int]) -> set[int]:
        return {cid for cid in category_ids if cid not in self._data.categories}

    def get_by_name(self, name: str) -> Category | None:
        return next(
            (c for c in self._data.categories.values() if c.name == name), None
        )

    def add(self, name: str) -> Category:
        category = Category(id=next(self._data.category_ids), name=name)
        self._data.categories[category.id] = category
        return category

    def list_all(self) -> list[Category]:
        return sorted(self._data.categories.values(), key=lambda c: c.id)
