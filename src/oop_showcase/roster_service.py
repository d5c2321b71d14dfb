"""Roster service: build instruments and bands from plain data.

A roster describes the instruments of a band as JSON-friendly dicts so
that the line-up can live in ``config.json`` instead of code.

Structure of a roster::

    {
      "instruments": [
        {"kind": "piano", "brand": "Lomi", "has_pedal": true},
        {"kind": "acoustic", "brand": "Aloha", "string_gauge": "light"},
        {"kind": "electric", "brand": "Gibson", "string_gauge": "medium"},
        {"kind": "bass", "brand": "Fender", "string_gauge": "heavy"}
      ]
    }

Kinds are matched case insensitively.  Every amplified instrument built
by one :class:`RosterService` is wired to the same :class:`Amplifier`,
so tuning the electric guitar changes the volume the bass reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .amplifier import Amplifier
from .band import Band
from .constants import ACOUSTIC_STRING_GAUGE, BASS_STRING_GAUGE, ELECTRIC_STRING_GAUGE
from .instruments import AcousticGuitar, BassGuitar, ElectricGuitar, Instrument, Piano


def _build_piano(spec: Dict[str, Any], amplifier: Amplifier) -> Instrument:
    return Piano(spec["brand"], has_pedal=bool(spec.get("has_pedal", False)))


def _build_acoustic(spec: Dict[str, Any], amplifier: Amplifier) -> Instrument:
    return AcousticGuitar(spec["brand"], str(spec.get("string_gauge", ACOUSTIC_STRING_GAUGE)))


def _build_electric(spec: Dict[str, Any], amplifier: Amplifier) -> Instrument:
    gauge = str(spec.get("string_gauge", ELECTRIC_STRING_GAUGE))
    return ElectricGuitar(spec["brand"], amplifier, string_gauge=gauge)


def _build_bass(spec: Dict[str, Any], amplifier: Amplifier) -> Instrument:
    gauge = str(spec.get("string_gauge", BASS_STRING_GAUGE))
    return BassGuitar(spec["brand"], amplifier, string_gauge=gauge)


BUILDERS: Dict[str, Callable[[Dict[str, Any], Amplifier], Instrument]] = {
    "piano": _build_piano,
    "acoustic": _build_acoustic,
    "electric": _build_electric,
    "bass": _build_bass,
}


@dataclass
class RosterService:
    """Turn roster dicts into instruments sharing one amplifier."""

    roster: Dict[str, Any] = field(default_factory=dict)
    amplifier: Amplifier = field(default_factory=Amplifier)

    @staticmethod
    def kinds() -> List[str]:
        return sorted(BUILDERS)

    def build_instrument(self, spec: Dict[str, Any]) -> Instrument:
        """Build one instrument from its spec dict.

        Raises ``ValueError`` when the kind is unknown or the brand is
        missing or blank.
        """
        if not isinstance(spec, dict):
            raise ValueError(f"Instrument spec must be an object, got {spec!r}.")
        kind = str(spec.get("kind", "")).strip().lower()
        builder = BUILDERS.get(kind)
        if builder is None:
            raise ValueError(
                f"Unknown instrument kind '{spec.get('kind')}'. Use one of: {', '.join(self.kinds())}."
            )
        brand = spec.get("brand")
        if not isinstance(brand, str) or not brand.strip():
            raise ValueError(f"Instrument of kind '{kind}' needs a brand.")
        return builder(spec, self.amplifier)

    def build_band(self) -> Band:
        """Build a band from ``roster["instruments"]`` in listed order."""
        specs = self.roster.get("instruments", [])
        if not isinstance(specs, list):
            raise ValueError("Roster 'instruments' must be a list.")
        return Band(self.build_instrument(spec) for spec in specs)
