"""Concurrent fan-out over independent dependency calls."""

import asyncio
from collections.abc import Coroutine, Iterable
from typing import Any


async def gather_ordered(coroutines: Iterable[Coroutine[Any, Any, Any]]) -> list[Any]:
    """Run coroutines concurrently and return their results in input order.

    The first failure cancels the coroutines still running and is raised
    as-is rather than wrapped in an exception group.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(coroutine) for coroutine in coroutines]
    except ExceptionGroup as errors:
        raise errors.exceptions[0]
    return [task.result() for task in tasks]
