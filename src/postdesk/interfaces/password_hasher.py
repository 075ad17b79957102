"""Interface for one-way password hashing."""

import abc


class PasswordHasher(abc.ABC):
    """Contract for hashing passwords and checking them against stored hashes."""

    @abc.abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted, self-describing hash of `password`."""

    @abc.abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """Return True if `password` matches `password_hash`."""
