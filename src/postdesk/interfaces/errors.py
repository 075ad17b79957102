"""Errors shared by all persistence ports."""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class StorageError(RepositoryError):
    """Raised when the underlying store fails (unreachable, bad data, etc.).

    Storage errors are not retried; they surface to callers as a generic
    failure and are logged by the entrypoints.
    """
