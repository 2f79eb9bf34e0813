"""Context propagation for structured logging.

Fields pushed here (venue_id, viewer_id, seed, ...) are injected into every
log record emitted within the scope. Context lives in a ContextVar, so
concurrent feed requests on different threads or tasks never see each
other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge fields into the logging context.

    Args:
        **kwargs: Key-value pairs to add to the logging context

    Returns:
        Token for ``pop_log_context``

    Example:
        >>> token = push_log_context(venue_id="bar-do-ze", viewer_id="u1")
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the context captured by ``push_log_context``."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly for tests."""
    LogContextVar.set({})


class log_context:
    """Context manager for scoped logging context.

    Example:
        >>> with log_context(venue_id="bar-do-ze"):
        ...     logger.info("Building feed")  # includes venue_id
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
