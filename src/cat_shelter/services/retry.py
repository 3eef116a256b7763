"""Bounded retry for calls to shelter dependencies."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from cat_shelter.errors import InternalError

DEFAULT_ATTEMPTS = 2

T = TypeVar("T")

_logger = logging.getLogger(__name__)


async def with_retry(
    max_attempts: int,
    operation: Callable[[], Awaitable[T]],
    *,
    action: str = "dependency call",
) -> T:
    """Await ``operation``, retrying on ``ConnectionError``.

    At most ``max_attempts`` calls are made in total. When every attempt fails
    with a connection error an ``InternalError`` is raised. Any other
    exception, including task cancellation, propagates from the attempt that
    raised it.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    attempt = 0
    while True:
        attempt += 1
        try:
            return await operation()
        except ConnectionError as exc:
            if attempt >= max_attempts:
                _logger.error(
                    "%s unreachable after %s attempts: %s", action, attempt, exc
                )
                raise InternalError(f"{action} is unavailable") from exc
            _logger.warning(
                "%s failed (attempt %s/%s): %s", action, attempt, max_attempts, exc
            )
