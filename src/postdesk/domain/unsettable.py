"""Tri-state handling for partial updates.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias and
the `supplied_fields` helper used when applying partial updates to posts.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field was omitted and is left unchanged.
* ``None``: the field was explicitly sent as null (rejected by validation
  for post fields, none of which can be cleared).
* concrete ``T``: the field is explicitly updated to a new value.
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, TypeVar


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark fields intentionally left unset in patches.

    This is distinct from `None`, which indicates an explicit null.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
Unsettable = T | _UnsetType | None


def is_unset(value: Any) -> bool:
    """Return True if `value` is the ``UNSET`` sentinel."""
    return isinstance(value, _UnsetType)


def supplied_fields(obj: Any, names: tuple[str, ...]) -> dict[str, Any]:
    """Collect the named dataclass fields of `obj` that are not ``UNSET``.

    Args:
        obj: A dataclass instance (e.g. a patch command).
        names: The field names to consider.

    Returns:
        Mapping of field name to value for every supplied field, ``None`` included.
    """
    if not is_dataclass(obj):
        raise TypeError(f"{type(obj).__name__} is not a dataclass instance")
    known = {f.name for f in fields(obj)}
    return {
        name: getattr(obj, name)
        for name in names
        if name in known and not is_unset(getattr(obj, name))
    }
