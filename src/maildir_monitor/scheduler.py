"""Simple sleep-based host loop for blocks."""

from __future__ import annotations

import time
from typing import Callable, Protocol

from .models import PollResult


class Block(Protocol):
    def update(self) -> PollResult:
        ...


def run_block(
    block: Block,
    on_update: Callable[[PollResult], bool | None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    max_polls: int | None = None,
) -> int:
    """Poll *block* until it stops asking for more, returning the poll count.

    *on_update* is called after every poll; returning ``False`` from it stops
    the loop.  *max_polls* bounds the number of polls.
    """
    polls = 0
    while max_polls is None or polls < max_polls:
        result = block.update()
        polls += 1

        if on_update is not None and on_update(result) is False:
            break
        if result.delay is None:
            break
        if max_polls is not None and polls >= max_polls:
            break

        sleep(result.delay.total_seconds())

    return polls
