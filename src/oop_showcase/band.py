"""A band: polymorphism over :class:`~oop_showcase.instruments.Instrument`.

The band neither knows nor cares which concrete instruments it holds;
it asks each one to ``perform`` through the shared interface.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from .instruments import Instrument
from .music import Music


class Band:
    """Ordered, fixed collection of instruments."""

    def __init__(self, instruments: Iterable[Instrument]) -> None:
        self._instruments: Tuple[Instrument, ...] = tuple(instruments)

    @property
    def instruments(self) -> Tuple[Instrument, ...]:
        return self._instruments

    def perform(self, music: Music) -> None:
        for instrument in self._instruments:
            instrument.perform(music)

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self._instruments)

    def __len__(self) -> int:
        return len(self._instruments)
