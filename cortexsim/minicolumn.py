"""Minicolumns: groups of neurons sharing an energy budget and an astrocyte."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from cortexsim.astrocyte import EnergySource
from cortexsim.neuron import NUM_NEURONS, Neuron

BASE_THRESHOLD = 0.6
MIN_THRESHOLD = 0.55
MAX_THRESHOLD = 0.85
ACTIVE_COST = 0.04
IDLE_COST = 0.005
LOW_ENERGY = 0.2


@dataclass
class Minicolumn:
    """A cortical minicolumn that activates when any neuron crosses the threshold."""

    neurons: list[Neuron] = field(default_factory=list)
    astrocyte: EnergySource | None = None
    activated: bool = False
    activation: float = 0.0
    energy_level: float = 1.0

    @classmethod
    def create(
        cls, astrocyte: EnergySource | None = None, rng: random.Random | None = None
    ) -> Minicolumn:
        """Build a minicolumn of randomly initialised neurons."""
        if rng is None:
            rng = random.Random()
        neurons = [Neuron.random(rng) for _ in range(NUM_NEURONS)]
        return cls(neurons=neurons, astrocyte=astrocyte)

    def activation_threshold(self) -> float:
        """Threshold that rises as the column's energy falls."""
        energy_factor = 0.2 * (1.0 - self.energy_level)
        return max(MIN_THRESHOLD, min(MAX_THRESHOLD, BASE_THRESHOLD + energy_factor))

    def process_pattern(self, inputs: Sequence[complex], context: Sequence[float]) -> None:
        """Respond to an input pattern, updating activation and energy."""
        if self.energy_level < LOW_ENERGY and self.astrocyte is not None:
            self.energy_level += self.astrocyte.transfer_energy()

        calcium_mod = 1.0
        if self.astrocyte is not None:
            calcium_mod = 1.0 + self.astrocyte.calcium_level * 0.6

        threshold = self.activation_threshold()
        responses = [n.activation(inputs, context) * calcium_mod for n in self.neurons]

        self.activation = max([0.0, *responses])
        self.activated = any(r >= threshold for r in responses)

        self.energy_level -= ACTIVE_COST if self.activated else IDLE_COST
        self.energy_level = max(0.0, self.energy_level)

    def rest(self) -> None:
        """Recover energy, more so with strong astrocytic calcium."""
        recovery = 0.5
        if self.astrocyte is not None:
            recovery += 0.3 * self.astrocyte.calcium_level
        self.energy_level = min(1.0, self.energy_level + recovery)