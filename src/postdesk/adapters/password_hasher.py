"""Werkzeug-backed password hashing."""

from werkzeug.security import check_password_hash, generate_password_hash

from postdesk.config import get_password_hash_method
from postdesk.interfaces.password_hasher import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted password hashes in Werkzeug's ``method$salt$hash`` format.

    Args:
        method: Werkzeug hashing method (e.g. ``"scrypt"``,
            ``"pbkdf2:sha256:600000"``). Defaults to the configured method.
    """

    def __init__(self, method: str | None = None) -> None:
        self.method = method or get_password_hash_method()

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self.method)

    def verify(self, password_hash: str, password: str) -> bool:
        return check_password_hash(password_hash, password)
