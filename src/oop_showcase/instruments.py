"""Instrument hierarchy.

Every instrument has a brand and offers two capabilities: ``tune()`` and
``play(music)``.  :class:`Instrument` is an abstract base class; concrete
instruments must implement ``tune`` or they cannot be instantiated.
``perform`` is the only method that subclasses never override; they
customise a performance solely through ``tune`` and ``play``.

The hierarchy::

    Instrument
    ├── Piano
    └── Guitar
        ├── AcousticGuitar
        ├── ElectricGuitar   (amplified)
        └── BassGuitar       (amplified)

Amplified guitars hold a reference to an :class:`Amplifier` supplied by
the caller.  The same amplifier may be shared by several guitars.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .amplifier import Amplifier
from .constants import (
    ACOUSTIC_FRET_COUNT,
    ACOUSTIC_NUMBER_OF_STRINGS,
    BASS_STRING_GAUGE,
    ELECTRIC_STRING_GAUGE,
    ELECTRIC_TUNING_VOLUME,
    PIANO_BLACK_KEYS,
    PIANO_KEYS,
)
from .music import Music


class Instrument(ABC):
    """Base class for all instruments."""

    def __init__(self, brand: str) -> None:
        self._brand = brand

    @property
    def brand(self) -> str:
        return self._brand

    @abstractmethod
    def tune(self) -> str:
        """Return a description of how the instrument is tuned."""
        raise NotImplementedError(f"Implement this method for {self.brand}")

    def play(self, music: Music) -> str:
        """Return the prepared notes; subclasses decorate this result."""
        return music.prepared()

    def perform(self, music: Music) -> None:
        """Print the tuning line followed by the playing line."""
        print(self.tune())
        print(self.play(music))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(brand={self.brand!r})"


class Piano(Instrument):
    keys = PIANO_KEYS
    black_keys = PIANO_BLACK_KEYS

    def __init__(self, brand: str, has_pedal: bool = False) -> None:
        super().__init__(brand)
        self._has_pedal = has_pedal

    @property
    def has_pedal(self) -> bool:
        return self._has_pedal

    def tune(self) -> str:
        return f"Piano standard tuning for {self.brand}."

    def play(self, music: Music, using_pedals: Optional[bool] = None) -> str:
        """Play ``music``, optionally choosing whether to use the pedals.

        ``using_pedals=None`` uses the piano's own ``has_pedal``.  Code that
        only knows it holds an :class:`Instrument` (``perform``, a band)
        calls ``play(music)`` and therefore always takes that path.
        Pedals are only heard when the piano has one *and* the caller
        asks for it.
        """
        if using_pedals is None:
            using_pedals = self.has_pedal
        prepared_notes = super().play(music)
        if self.has_pedal and using_pedals:
            return f"Play piano notes {prepared_notes} with pedals."
        return f"Play piano notes {prepared_notes} without pedals."


class Guitar(Instrument):
    """Abstract guitar: adds the string gauge, leaves ``tune`` to subclasses."""

    def __init__(self, brand: str, string_gauge: str) -> None:
        super().__init__(brand)
        self._string_gauge = string_gauge

    @property
    def string_gauge(self) -> str:
        return self._string_gauge


class AcousticGuitar(Guitar):
    number_of_strings = ACOUSTIC_NUMBER_OF_STRINGS
    fret_count = ACOUSTIC_FRET_COUNT

    def tune(self) -> str:
        return f"Tune {self.brand} acoustic with E A D G B E"

    def play(self, music: Music) -> str:
        prepared_notes = super().play(music)
        return f"Play folk tune on frets {prepared_notes}."


class ElectricGuitar(Guitar):
    """Guitar composed with an amplifier; tuning turns it up to 5."""

    def __init__(
        self,
        brand: str,
        amplifier: Amplifier,
        string_gauge: str = ELECTRIC_STRING_GAUGE,
    ) -> None:
        super().__init__(brand, string_gauge)
        self._amplifier = amplifier

    @property
    def amplifier(self) -> Amplifier:
        return self._amplifier

    def tune(self) -> str:
        self.amplifier.plug_in()
        self.amplifier.volume = ELECTRIC_TUNING_VOLUME
        return f"Tune {self.brand} bass with E A D G"

    def play(self, music: Music) -> str:
        prepared_notes = super().play(music)
        return f"Play bass line {prepared_notes} at volume {self.amplifier.volume}."


class BassGuitar(Guitar):
    """Guitar composed with an amplifier; tuning only plugs it in."""

    def __init__(
        self,
        brand: str,
        amplifier: Amplifier,
        string_gauge: str = BASS_STRING_GAUGE,
    ) -> None:
        super().__init__(brand, string_gauge)
        self._amplifier = amplifier

    @property
    def amplifier(self) -> Amplifier:
        return self._amplifier

    def tune(self) -> str:
        self.amplifier.plug_in()
        return f"Tune {self.brand} bass with E A D G"

    def play(self, music: Music) -> str:
        prepared_notes = super().play(music)
        return f"Play bass line {prepared_notes} at volume {self.amplifier.volume}."
