"""Music value passed to instruments.

A :class:`Music` is an immutable, ordered sequence of note tokens.  It
exists so that instruments take a single value rather than a bare list,
which leaves room to grow the notion of "music" without touching the
instrument signatures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Music:
    """Ordered note tokens, e.g. ``Music(["C", "L", "C"])``."""

    notes: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "notes", tuple(str(note) for note in self.notes))

    @classmethod
    def from_text(cls, text: str) -> "Music":
        """Split ``text`` on whitespace into notes."""
        return cls(text.split())

    def prepared(self) -> str:
        """Return the notes joined by single spaces (empty string if none)."""
        return " ".join(self.notes)
