"""
Immutable styled text value.

A ``StyledText`` is an ordered tuple of ``Run`` objects. The plain string is
the concatenation of the run texts; attribute lookup scans for the run that
owns a given character offset. Zero-length runs are kept in ``runs`` but never
own a character.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .attributes import EMPTY_ATTRIBUTES, AttributeKey, AttributeSet


@dataclass(frozen=True)
class Run:
    """A span of text sharing one attribute set."""

    text: str
    attributes: AttributeSet = field(default_factory=lambda: EMPTY_ATTRIBUTES)

    def __len__(self) -> int:
        return len(self.text)

    def get(self, key: AttributeKey, default=None):
        return self.attributes.get(key, default)


class StyledText:
    """Built styled text. Never changes after construction."""

    __slots__ = ("_runs", "_string")

    def __init__(self, runs: Tuple[Run, ...] = ()):
        self._runs = tuple(runs)
        self._string = "".join(run.text for run in self._runs)

    @property
    def runs(self) -> Tuple[Run, ...]:
        return self._runs

    @property
    def string(self) -> str:
        return self._string

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"StyledText({self._string!r}, runs={len(self._runs)})"

    def __len__(self) -> int:
        return len(self._string)

    def __iter__(self) -> Iterator[Run]:
        return iter(self._runs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._runs == other._runs

    __hash__ = None  # payloads are not required to be hashable

    def _locate(self, index: int) -> Tuple[Run, int, int]:
        size = len(self._string)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("styled text index out of range")
        start = 0
        for run in self._runs:
            end = start + len(run.text)
            if start <= index < end:
                return run, start, end
            start = end
        raise IndexError("styled text index out of range")  # pragma: no cover

    def run_at(self, index: int) -> Run:
        """Return the run owning the character at ``index``."""
        return self._locate(index)[0]

    def attributes_at(self, index: int) -> AttributeSet:
        """Return the attribute set applied to the character at ``index``."""
        return self._locate(index)[0].attributes

    def run_range(self, index: int) -> Tuple[int, int]:
        """Return the ``(start, end)`` range of the run owning ``index``."""
        _, start, end = self._locate(index)
        return start, end
