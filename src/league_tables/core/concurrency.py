"""
Settle-all fan-out: run awaitables concurrently, wait for every one, split results from failures.
One failing branch never cancels its siblings.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Dict, Mapping, Tuple, TypeVar

T = TypeVar("T")


async def settle_all(
    tasks: Mapping[str, Awaitable[T]],
) -> Tuple[Dict[str, T], Dict[str, Exception]]:
    """
    Await all tasks together. Returns (results, failures), both keyed like `tasks`
    and in the same key order. Non-Exception BaseExceptions (e.g. cancellation) propagate.
    """
    keys = list(tasks.keys())
    outcomes = await asyncio.gather(*(tasks[k] for k in keys), return_exceptions=True)
    results: Dict[str, T] = {}
    failures: Dict[str, Exception] = {}
    for key, outcome in zip(keys, outcomes):
        if isinstance(outcome, Exception):
            failures[key] = outcome
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results[key] = outcome
    return results, failures
