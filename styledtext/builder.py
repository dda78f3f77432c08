"""
Fluent builder for ``StyledText``.

    styled = (
        Builder()
        .text("Hello", [TextColor(RED), Font(FontRef("Helvetica", 14))])
        .space()
        .text("World", [Link("https://example.com")])
        .build()
    )

The builder only appends. ``build()`` returns an immutable snapshot, so a
value that was handed out is never changed by later appends. Passing
``finalize=True`` closes the builder and any further append raises
``BuilderFinalizedError``.

A builder holds no lock; share one between threads only under external
synchronization.
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Sequence

from pydantic import Field, TypeAdapter

from .attributes import Attribute, attributes_dict
from .exceptions import BuilderFinalizedError
from .text import Run, StyledText

LOGGER = logging.getLogger(__name__)

SpaceCount = Annotated[int, Field(ge=0)]
"""Number of space runs to append, declared non-negative.

Static type checkers only see ``int`` here and will accept ``spaces(-1)``;
the ``ge=0`` bound is enforced by pydantic when ``Builder.spaces`` runs.
"""

_SPACE_COUNT = TypeAdapter(SpaceCount)


class Builder:
    """Accumulates runs of text and attributes, in call order."""

    def __init__(self) -> None:
        self._runs: List[Run] = []
        self._finalized = False

    def __len__(self) -> int:
        return len(self._runs)

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "open"
        return f"<Builder runs={len(self._runs)} {state}>"

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_open(self, operation: str) -> None:
        if self._finalized:
            raise BuilderFinalizedError(operation)

    def text(self, content: str, attributes: Sequence[Attribute] = ()) -> "Builder":
        """Append ``content`` styled with ``attributes``.

        Attributes are folded into one set; a key listed twice keeps the last
        value. Empty ``content`` appends a zero-length run.
        """
        self._ensure_open("text")
        run = Run(content, attributes_dict(attributes))
        self._runs.append(run)
        LOGGER.debug(
            "builder.text runs=%d len=%d keys=%s",
            len(self._runs),
            len(content),
            [k.value for k in run.attributes],
        )
        return self

    def space(self, attributes: Sequence[Attribute] = ()) -> "Builder":
        """Append a single space styled with ``attributes``."""
        self._ensure_open("space")
        return self.text(" ", attributes)

    def spaces(
        self, count: SpaceCount, attributes: Sequence[Attribute] = ()
    ) -> "Builder":
        """Append ``count`` separate one-space runs, each with ``attributes``.

        ``count`` must be a non-negative ``int``; anything else raises
        ``pydantic.ValidationError`` before a run is appended.
        """
        self._ensure_open("spaces")
        count = _SPACE_COUNT.validate_python(count, strict=True)
        attributes = tuple(attributes)
        for _ in range(count):
            self.space(attributes)
        return self

    def build(self, *, finalize: bool = False) -> StyledText:
        """Return a snapshot of the runs appended so far.

        With ``finalize=True`` the builder is closed for further appends.
        """
        if finalize and not self._finalized:
            self._finalized = True
            LOGGER.debug("builder.finalized runs=%d", len(self._runs))
        return StyledText(tuple(self._runs))
