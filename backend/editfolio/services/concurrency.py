"""Structured Fan-Out — run independent awaitables together and join.

Invariants:
    - Results are returned in argument order
    - First failure cancels the still-running siblings
    - The first error is re-raised as itself, never wrapped in an ExceptionGroup

Design Decisions:
    - asyncio.TaskGroup over gather(): siblings are cancelled and awaited before
      the error leaves the block, so no orphan task touches a closed session
"""

import asyncio
from typing import Any, Awaitable


async def run_concurrently(*awaitables: Awaitable[Any]) -> list[Any]:
    """Await all concurrently; propagate the first error encountered."""
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_await(aw)) for aw in awaitables]
    except BaseExceptionGroup as group:
        raise group.exceptions[0] from None
    return [task.result() for task in tasks]


async def _await(aw: Awaitable[Any]) -> Any:
    return await aw
