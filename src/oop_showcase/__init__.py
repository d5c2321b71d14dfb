"""OOP Showcase package

Toy object models demonstrating encapsulation, inheritance, overriding,
polymorphism, composition and aggregation: musical instruments, a band
and a car.  A command-line interface and an optional PySide6 window sit
on top.  Public classes are re-exported here for convenience.
"""

from .amplifier import Amplifier  # noqa: F401
from .band import Band  # noqa: F401
from .car import AirFreshener, Car, Engine, Wheel  # noqa: F401
from .config_service import ConfigService  # noqa: F401
from .instruments import (  # noqa: F401
    AcousticGuitar,
    BassGuitar,
    ElectricGuitar,
    Guitar,
    Instrument,
    Piano,
)
from .music import Music  # noqa: F401
from .roster_service import RosterService  # noqa: F401
