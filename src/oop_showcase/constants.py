"""Centralized constants for the instrument and car models.

Class-level values (piano keys, guitar frets, amplifier bounds and so on)
are defined here and re-exposed as class attributes by the models that
own them (single source of truth).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Instruments
PIANO_KEYS = 32
PIANO_BLACK_KEYS = 12

ACOUSTIC_NUMBER_OF_STRINGS = 6
ACOUSTIC_FRET_COUNT = 20

ELECTRIC_STRING_GAUGE = "light"
ACOUSTIC_STRING_GAUGE = "light"
BASS_STRING_GAUGE = "heavy"

# ---------------------------------------------------------------------------
# Amplifier
AMPLIFIER_MIN_VOLUME = 0
AMPLIFIER_MAX_VOLUME = 10
ELECTRIC_TUNING_VOLUME = 5

# ---------------------------------------------------------------------------
# Car
ENGINE_POWER = 100
WHEEL_RADIUS = 10
WHEEL_COUNT = 4
AIR_FRESHENER_SMELL = "Pine"
