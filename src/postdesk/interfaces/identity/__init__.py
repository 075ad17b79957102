"""POSTDESK Identity Interface Package"""

from .errors import (
    EmailAlreadyRegisteredError,
    IdentityError,
    InvalidCredentialsError,
    UnauthenticatedError,
)
from .token_repository import AccessTokenRecord, AccessTokenRepository
from .user_repository import NewUser, UserCredentials, UserRepository

__all__ = [
    "AccessTokenRecord",
    "AccessTokenRepository",
    "EmailAlreadyRegisteredError",
    "IdentityError",
    "InvalidCredentialsError",
    "NewUser",
    "UnauthenticatedError",
    "UserCredentials",
    "UserRepository",
]
