"""CLI helpers for POSTDESK.

Utilities used by the command-line interface: database URL resolution and
sanitization for safe display, and message emitters that write to stderr
with emoji→ASCII fallbacks.
"""

from .db_url import require_db_url, sanitize_url
from .messages import error, success, warn

__all__ = ["error", "require_db_url", "sanitize_url", "success", "warn"]
