"""Neurons with complex-valued dendritic weights and context sensitivity."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Sequence

NUM_NEURONS = 12
DENDRITE_LENGTH = 8
PATTERN_SIZE = 5


@dataclass
class Neuron:
    """A neuron holding complex dendritic weights and real context weights."""

    dendrites: list[complex] = field(default_factory=lambda: [0j] * DENDRITE_LENGTH)
    context: list[float] = field(default_factory=lambda: [0.0] * PATTERN_SIZE)

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Neuron:
        """Create a neuron with randomly initialised weights."""
        if rng is None:
            rng = random.Random()
        dendrites = []
        for _ in range(DENDRITE_LENGTH):
            phase = rng.random() * 2 * math.pi
            dendrites.append(complex(rng.random() * 0.5, math.sin(phase)))
        context = [rng.gauss(0.0, 1.0) * 0.3 for _ in range(PATTERN_SIZE)]
        return cls(dendrites=dendrites, context=context)

    def activation(self, inputs: Sequence[complex], context: Sequence[float]) -> float:
        """Return the sigmoid-normalised response of the neuron to an input."""
        if not inputs:
            return 0.0

        dendrite_sum = sum(self.dendrites[:DENDRITE_LENGTH], 0j)
        total = 0j
        for i, value in enumerate(inputs[:PATTERN_SIZE]):
            factor = 1.0
            if i < len(context) and i < len(self.context):
                factor = 1 + context[i] * self.context[i]
            total += value * factor * dendrite_sum

        magnitude = abs(total) / (len(inputs) * DENDRITE_LENGTH)
        return 1 / (1 + math.exp(-magnitude * 2))