"""Amplifier shared between electric instruments.

The stored volume is private and clamped into
``[AMPLIFIER_MIN_VOLUME, AMPLIFIER_MAX_VOLUME]``.  ``is_on`` can be read
from outside but only changes through :meth:`Amplifier.plug_in` and
:meth:`Amplifier.unplug`.  While the amplifier is off its audible
volume reads as ``0`` regardless of the stored value.

One amplifier may be wired into several guitars; they all hold the same
object, so a volume change made by one instrument is visible to the
others.
"""

from __future__ import annotations

from .constants import AMPLIFIER_MAX_VOLUME, AMPLIFIER_MIN_VOLUME


class Amplifier:
    """On/off flag plus a clamped volume."""

    def __init__(self) -> None:
        self._is_on = False
        self._volume = AMPLIFIER_MIN_VOLUME

    @property
    def is_on(self) -> bool:
        return self._is_on

    def plug_in(self) -> None:
        self._is_on = True

    def unplug(self) -> None:
        self._is_on = False

    @property
    def volume(self) -> int:
        return self._volume if self._is_on else 0

    @volume.setter
    def volume(self, value: int) -> None:
        self._volume = min(max(int(value), AMPLIFIER_MIN_VOLUME), AMPLIFIER_MAX_VOLUME)

    def __repr__(self) -> str:
        state = "on" if self._is_on else "off"
        return f"Amplifier({state}, volume={self.volume})"
