"""Composition and aggregation, shown with a car.

* Composition: a :class:`Car` creates its own :class:`Engine` and
  wheels.  Nobody else holds them and they live exactly as long as the
  car does.
* Aggregation: the :class:`AirFreshener` is created elsewhere and handed
  to the car.  It may be shared between cars and outlives any of them.
"""

from __future__ import annotations

from typing import Tuple

from .constants import AIR_FRESHENER_SMELL, ENGINE_POWER, WHEEL_COUNT, WHEEL_RADIUS


class Engine:
    power = ENGINE_POWER

    def start(self) -> None:
        print("Engine is on")


class Wheel:
    radius = WHEEL_RADIUS

    def rotate(self) -> None:
        print("wheels is rotating")


class AirFreshener:
    def __init__(self, smell: str = AIR_FRESHENER_SMELL) -> None:
        self.smell = smell


class Car:
    def __init__(self, air_freshener: AirFreshener) -> None:
        # Aggregation
        self._air_freshener = air_freshener

        # Composition
        self._engine = Engine()
        self._wheels: Tuple[Wheel, ...] = tuple(Wheel() for _ in range(WHEEL_COUNT))

    @property
    def air_freshener(self) -> AirFreshener:
        return self._air_freshener

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def wheels(self) -> Tuple[Wheel, ...]:
        return self._wheels

    def drive(self) -> None:
        self._engine.start()
        for wheel in self._wheels:
            wheel.rotate()
        print("The car is moving")
