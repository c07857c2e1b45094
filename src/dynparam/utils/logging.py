from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable

from rich.console import Console
from rich.logging import RichHandler


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log function calls at DEBUG level with basic error logging."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Calling %s args=%s kwargs=%s", func.__qualname__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("Error in %s: %s", func.__qualname__, e)
                raise
            logger.debug("%s returned %r", func.__qualname__, result)
            return result

        return _wrapper

    return _decorator


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route ``dynparam`` loggers through rich; DEBUG when verbose, WARNING otherwise."""
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("dynparam")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
