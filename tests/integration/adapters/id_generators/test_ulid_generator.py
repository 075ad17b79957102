"""Integration tests for adapter specific ULIDGenerator functionality."""

import ulid

from postdesk.adapters.id_generators import ULIDGenerator


def test_ulid_has_len_26():
    """ULIDs are 26 characters long."""
    assert len(ULIDGenerator().new_id()) == 26


def test_ulid_parses_back():
    """Generated ids are valid ULIDs according to ulid-py."""
    new_id = ULIDGenerator().new_id()
    assert str(ulid.parse(new_id)) == new_id
