"""Fenced code block tracking shared by the heading scanners."""
from __future__ import annotations

from enum import Enum
from typing import Iterable
from typing import Iterator

FENCE_MARKER = "```"


class FenceState(str, Enum):
    OUTSIDE = "OUTSIDE"
    INSIDE = "INSIDE"

    def toggled(self) -> "FenceState":
        return FenceState.INSIDE if self is FenceState.OUTSIDE else FenceState.OUTSIDE


def is_fence_line(line: str) -> bool:
    return line.strip().startswith(FENCE_MARKER)


def fence_states(lines: Iterable[str]) -> Iterator[FenceState]:
    """Yield the fence state of every line.

    A fence line flips the state on itself, so an opening fence reports
    ``INSIDE`` and a closing fence reports ``OUTSIDE``. An unbalanced fence
    leaves the rest of the text ``INSIDE``.
    """
    state = FenceState.OUTSIDE
    for line in lines:
        if is_fence_line(line):
            state = state.toggled()
        yield state
