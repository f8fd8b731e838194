"""Command-line driver running the cortex learning simulation."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Sequence, TextIO

from cortexsim.cortex import Cortex
from cortexsim.learning import apply_dopamine, apply_hebbian_learning, consolidate
from cortexsim.patterns import generate_input_tensor

INITIAL_LEARNING_RATE = 0.3
MIN_LEARNING_RATE = 0.1
GRID_ROWS = 3
GRID_COLS = 3
TRAINING_STEPS = 20
VARIED_STEPS = 15
DOPAMINE_MULTIPLIER = 1.2


def adjust_learning_rate(step: int) -> float:
    """Exponentially decaying learning rate with a floor."""
    return max(MIN_LEARNING_RATE, INITIAL_LEARNING_RATE * math.exp(-step / 20))


def _go_bool(value: bool) -> str:
    return "true" if value else "false"


def format_cortex_state(cortex: Cortex) -> str:
    """One line per column describing its activation and energy."""
    lines = [
        f"Колонка[{i}][{j}]: активирована={_go_bool(column.activated)}, "
        f"уровень={column.activation:.2f}, энергия={column.energy_level:.2f}\n"
        for i, row in enumerate(cortex.columns)
        for j, column in enumerate(row)
    ]
    return "".join(lines)


def format_energy_grid(cortex: Cortex) -> str:
    """The columns' energy levels times ten, truncated, as a grid."""
    rows = [
        "".join(f"{int(column.energy_level * 10)} " for column in row) + "\n"
        for row in cortex.columns
    ]
    return "Карта энергии (x10):\n" + "".join(rows)


def apply_learning(cortex: Cortex, inputs, learning_rate: float) -> None:
    """Apply Hebbian learning to every neuron of each activated column."""
    for row, input_row in zip(cortex.columns, inputs):
        for column, pattern in zip(row, input_row):
            if column.activated:
                for neuron in column.neurons:
                    apply_hebbian_learning(
                        neuron, pattern, cortex.global_context, learning_rate
                    )


def consolidate_memory(cortex: Cortex) -> None:
    """Consolidate the weights of every neuron in the cortex."""
    for row in cortex.columns:
        for column in row:
            for neuron in column.neurons:
                consolidate(neuron)


def _rest(cortex: Cortex, out: TextIO) -> None:
    out.write("\n=== Цикл отдыха ===\n")
    cortex.rest_cycle()
    cortex.update_astrocytes()
    out.write(format_energy_grid(cortex))


def run_simulation(rng: random.Random | None = None, out: TextIO | None = None) -> int:
    """Run the training and varied-input phases; return the total activations."""
    if rng is None:
        rng = random.Random()
    if out is None:
        out = sys.stdout

    cortex = Cortex(GRID_ROWS, GRID_COLS, rng=rng)
    inputs = generate_input_tensor(GRID_ROWS, GRID_COLS, rng)
    column_count = GRID_ROWS * GRID_COLS

    total_activations = 0
    max_activation = 0.0

    for step in range(TRAINING_STEPS):
        out.write(f"\n=== Шаг {step} ===\n")
        cortex.update_astrocytes()
        cortex.process_input(inputs)
        out.write(format_cortex_state(cortex))

        rate = adjust_learning_rate(step)
        apply_learning(cortex, inputs, rate)

        out.write("\nПрименяем дофаминовую модуляцию...\n")
        for row in cortex.columns:
            for column in row:
                if column.activated:
                    apply_dopamine(column, DOPAMINE_MULTIPLIER)

        out.write("Консолидация памяти...\n")
        consolidate_memory(cortex)

        active = [column for row in cortex.columns for column in row if column.activated]
        max_activation = max([max_activation, *(c.activation for c in active)])
        total_activations += len(active)

        out.write(
            f"Шаг {step}: активировано {len(active)}/{column_count} колонок "
            f"(макс. активация: {max_activation:.2f}, LR: {rate:.3f})\n"
        )
        out.write(format_energy_grid(cortex))

        if step % 5 == 4:
            _rest(cortex, out)

    average = total_activations / TRAINING_STEPS
    out.write(f"\nИтого: активаций={total_activations}, средняя={average:.1f} на шаг\n")

    varied = [generate_input_tensor(GRID_ROWS, GRID_COLS, rng) for _ in range(VARIED_STEPS)]
    for step, step_inputs in enumerate(varied):
        cortex.process_input(step_inputs)
        if step % 3 == 2:
            _rest(cortex, out)

    return total_activations


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the simulation command."""
    parser = argparse.ArgumentParser(description="Run the cortical minicolumn simulation.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    run_simulation(random.Random(args.seed), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())