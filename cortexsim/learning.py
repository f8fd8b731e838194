"""Plasticity rules: Hebbian learning, consolidation and dopamine modulation."""

from __future__ import annotations

import math
from typing import Sequence

from cortexsim.minicolumn import Minicolumn
from cortexsim.neuron import PATTERN_SIZE, Neuron

MAX_DENDRITE_NORM = 5.0


def apply_hebbian_learning(
    neuron: Neuron,
    inputs: Sequence[complex],
    context: Sequence[float],
    learning_rate: float,
) -> None:
    """Strengthen dendrites towards the context-modulated input and learn the context."""
    usable = min(len(inputs), PATTERN_SIZE, len(context), len(neuron.context))
    increments = [
        inputs[j] * (1 + context[j] * neuron.context[j]) * learning_rate
        for j in range(usable)
    ]

    updated = []
    for weight in neuron.dendrites:
        for increment in increments:
            weight += increment
        updated.append(weight)
    neuron.dendrites = updated

    neuron.context = [
        weight + learning_rate * context[j] if j < len(context) else weight
        for j, weight in enumerate(neuron.context)
    ]


def consolidate(neuron: Neuron) -> None:
    """Cap the dendrite magnitudes and squash context weights with tanh."""
    largest = max((abs(weight) for weight in neuron.dendrites), default=0.0)
    if largest > MAX_DENDRITE_NORM:
        scale = MAX_DENDRITE_NORM / largest
        neuron.dendrites = [weight * scale for weight in neuron.dendrites]
    neuron.context = [math.tanh(weight) for weight in neuron.context]


def apply_dopamine(column: Minicolumn, multiplier: float) -> None:
    """Scale every dendritic weight of the column's neurons."""
    for neuron in column.neurons:
        neuron.dendrites = [weight * multiplier for weight in neuron.dendrites]