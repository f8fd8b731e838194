"""A grid of minicolumns supported by astrocytes and shaped by lateral inhibition."""

from __future__ import annotations

import random
import time
from typing import Callable, Sequence

from cortexsim.astrocyte import Astrocyte
from cortexsim.minicolumn import Minicolumn
from cortexsim.neuron import PATTERN_SIZE

COLUMNS_PER_ASTROCYTE = 4
ACTIVE_CONTEXT_LEVEL = 0.9
NEIGHBOUR_ENERGY_DAMPING = 0.85
NEIGHBOUR_ACTIVATION_DAMPING = 0.9
ROW_SUPPRESSION_RATIO = 0.7


class Cortex:
    """A rows x cols sheet of minicolumns sharing a global context."""

    def __init__(
        self,
        rows: int,
        cols: int,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {rows}x{cols}")
        if rng is None:
            rng = random.Random()

        self.global_context: list[float] = [0.0] * PATTERN_SIZE
        count = max(1, rows * cols // COLUMNS_PER_ASTROCYTE)
        self.astrocytes: list[Astrocyte] = [
            Astrocyte(clock=clock, rng=rng) for _ in range(count)
        ]

        self.columns: list[list[Minicolumn]] = []
        astro_index = 0
        for i in range(rows):
            row = []
            for j in range(cols):
                row.append(Minicolumn.create(self.astrocytes[astro_index], rng))
                flat = i * cols + j + 1
                if flat % COLUMNS_PER_ASTROCYTE == 0 and astro_index < count - 1:
                    astro_index += 1
            self.columns.append(row)

    def update_astrocytes(self) -> None:
        """Advance every astrocyte's calcium wave and energy reserve."""
        for astrocyte in self.astrocytes:
            astrocyte.update()

    def process_input(self, inputs: Sequence[Sequence[Sequence[complex]]]) -> None:
        """Feed each column its pattern, then apply neighbour inhibition."""
        for row, input_row in zip(self.columns, inputs):
            for column, pattern in zip(row, input_row):
                column.process_pattern(pattern, self.global_context)
                if column.activated:
                    self.global_context[0] = ACTIVE_CONTEXT_LEVEL
        lateral_inhibition(self.columns)

    def apply_attention(self, focus: Sequence[Sequence[float]]) -> None:
        """Boost column activations by the matching attention weights."""
        for row, focus_row in zip(self.columns, focus):
            for column, weight in zip(row, focus_row):
                column.activation *= 1.0 + weight

    def rest_cycle(self) -> None:
        """Let every column recover energy."""
        for row in self.columns:
            for column in row:
                column.rest()

    def suppress_weak_in_rows(self) -> None:
        """Deactivate columns well below the strongest activation in their row."""
        for row in self.columns:
            strongest = max([0.0, *(column.activation for column in row)])
            for column in row:
                if column.activation < strongest * ROW_SUPPRESSION_RATIO:
                    column.activated = False


def lateral_inhibition(columns: Sequence[Sequence[Minicolumn]]) -> None:
    """Dampen the energy and activation of every neighbour of an active column."""
    for i, row in enumerate(columns):
        for j, column in enumerate(row):
            if not column.activated:
                continue
            for di in (-1, 0, 1):
                for dj in (-1, 0, 1):
                    if di == 0 and dj == 0:
                        continue
                    ni, nj = i + di, j + dj
                    if 0 <= ni < len(columns) and 0 <= nj < len(row):
                        neighbour = columns[ni][nj]
                        neighbour.energy_level *= NEIGHBOUR_ENERGY_DAMPING
                        neighbour.activation *= NEIGHBOUR_ACTIVATION_DAMPING