"""Astrocytes: glial cells that supply energy and calcium modulation to minicolumns."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

CALCIUM_WAVE_FREQUENCY = 0.5  # Hz
ENERGY_TRANSFER_RATE = 0.8
MAX_TRANSFER = 0.5
RESERVE_RECOVERY = 0.01


@runtime_checkable
class EnergySource(Protocol):
    """Anything a minicolumn can draw energy and calcium modulation from."""

    calcium_level: float

    def transfer_energy(self) -> float:
        """Hand over part of the stored energy and return the amount."""
        ...


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Astrocyte:
    """An astrocyte with an oscillating calcium level and an energy reserve."""

    calcium_level: float = 0.3
    energy_reserve: float = 1.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    last_activity: float = field(init=False)

    def __post_init__(self) -> None:
        self.last_activity = self.clock()

    def update(self) -> None:
        """Advance the calcium wave and replenish the energy reserve."""
        now = self.clock()
        elapsed = now - self.last_activity
        phase = 2 * math.pi * CALCIUM_WAVE_FREQUENCY * elapsed
        calcium = 0.8 + 0.5 * math.sin(phase)
        calcium += self.rng.random() * 0.1 - 0.05
        self.calcium_level = _clamp(calcium, 0.0, 1.0)

        # The reserve recovers in two increments per update.
        self.energy_reserve = min(1.0, self.energy_reserve + RESERVE_RECOVERY)
        self.last_activity = now
        self.energy_reserve = min(1.0, self.energy_reserve + RESERVE_RECOVERY)

    def transfer_energy(self) -> float:
        """Give away up to half a unit of energy from the reserve."""
        transferred = min(MAX_TRANSFER, self.energy_reserve * ENERGY_TRANSFER_RATE)
        self.energy_reserve -= transferred
        return transferred

    def rest(self) -> None:
        """Restore the reserve fully and settle the calcium level."""
        self.energy_reserve = 1.0
        self.calcium_level = 0.5