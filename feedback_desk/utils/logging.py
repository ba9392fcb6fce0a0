"""Logging helpers: debug output gated on APP_DEBUG, errors with context."""

import logging
from os import getenv
from typing import Any, Mapping, Optional

DEBUG = getenv("APP_DEBUG", "false").lower() == "true"

logger = logging.getLogger("FeedbackDesk")


def debug_log(message: str, *args) -> None:
    """%-style debug message, emitted only when APP_DEBUG is true."""
    if DEBUG:
        logger.debug(message, *args)


def error_log(message: str, exc: Optional[BaseException] = None, context: Optional[Mapping] = None) -> None:
    """Log ``message`` with ``key=value`` context and the exception's traceback."""
    if context:
        message = f"{message} | " + ", ".join(f"{k}={v}" for k, v in context.items())
    logger.error(message, exc_info=exc)


def request_context(request: Any) -> dict:
    context = {}
    url = getattr(request, "url", None)
    if url is not None:
        context["path"] = getattr(url, "path", str(url))
    method = getattr(request, "method", None)
    if method:
        context["method"] = method
    headers = getattr(request, "headers", None)
    if headers is not None:
        context["user_agent"] = headers.get("user-agent", "unknown")
    return context


def log_request_error(request: Any, exc: BaseException, message: Optional[str] = None) -> None:
    error_log(message or f"Unhandled exception: {type(exc).__name__}", exc=exc, context=request_context(request))
