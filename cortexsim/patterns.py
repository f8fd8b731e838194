"""Generation and normalisation of complex-valued input patterns."""

from __future__ import annotations

import math
import random
from typing import Sequence

from cortexsim.neuron import PATTERN_SIZE


def complex_norm(vec: Sequence[complex]) -> list[complex]:
    """Return the vector scaled to unit Euclidean length; a zero vector is returned as is."""
    magnitude = math.sqrt(sum(v.real * v.real + v.imag * v.imag for v in vec))
    if magnitude > 0:
        return [complex(v.real / magnitude, v.imag / magnitude) for v in vec]
    return list(vec)


def generate_pattern(rng: random.Random | None = None) -> list[complex]:
    """Points evenly spaced on the unit circle with a little Gaussian noise."""
    if rng is None:
        rng = random.Random()
    pattern = []
    for i in range(PATTERN_SIZE):
        phase = i * 2 * math.pi / PATTERN_SIZE
        real = math.cos(phase) + rng.gauss(0.0, 1.0) * 0.1
        imag = math.sin(phase) + rng.gauss(0.0, 1.0) * 0.1
        pattern.append(complex(real, imag))
    return pattern


def generate_input_tensor(
    rows: int, cols: int, rng: random.Random | None = None
) -> list[list[list[complex]]]:
    """A rows x cols grid of independently generated patterns."""
    if rows < 0 or cols < 0:
        raise ValueError(f"grid dimensions must be non-negative, got {rows}x{cols}")
    if rng is None:
        rng = random.Random()
    return [[generate_pattern(rng) for _ in range(cols)] for _ in range(rows)]