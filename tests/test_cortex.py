import random

import pytest

from cortexsim.astrocyte import Astrocyte
from cortexsim.cortex import Cortex, lateral_inhibition
from cortexsim.minicolumn import Minicolumn
from cortexsim.neuron import PATTERN_SIZE
from cortexsim.patterns import generate_input_tensor


def _fixed_clock():
    return 0.0


def _cortex(rows=3, cols=3, seed=1):
    return Cortex(rows, cols, rng=random.Random(seed), clock=_fixed_clock)


def _silence(cortex, calcium):
    for astrocyte in cortex.astrocytes:
        astrocyte.calcium_level = calcium
    for row in cortex.columns:
        for column in row:
            for neuron in column.neurons:
                neuron.dendrites = [0j] * len(neuron.dendrites)


def _grid(rows, cols, activation=1.0):
    return [
        [Minicolumn(activation=activation, energy_level=1.0) for _ in range(cols)]
        for _ in range(rows)
    ]


def test_construction_shape_and_context():
    cortex = _cortex()
    assert len(cortex.columns) == 3
    assert all(len(row) == 3 for row in cortex.columns)
    assert cortex.global_context == [0.0] * PATTERN_SIZE


def test_astrocytes_shared_in_blocks_of_four():
    cortex = _cortex()
    assert len(cortex.astrocytes) == 2
    first, second = cortex.astrocytes
    assert cortex.columns[0][0].astrocyte is first
    assert cortex.columns[1][0].astrocyte is first
    assert cortex.columns[1][1].astrocyte is second
    assert cortex.columns[2][2].astrocyte is second


def test_small_cortex_has_one_astrocyte():
    cortex = _cortex(1, 1)
    assert len(cortex.astrocytes) == 1
    assert cortex.columns[0][0].astrocyte is cortex.astrocytes[0]


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Cortex(-1, 3)


def test_process_input_activates_and_sets_context():
    cortex = _cortex()
    _silence(cortex, calcium=1.0)
    cortex.process_input(generate_input_tensor(3, 3, random.Random(2)))
    assert all(column.activated for row in cortex.columns for column in row)
    assert cortex.global_context[0] == pytest.approx(0.9)


def test_process_input_without_activation_leaves_context():
    cortex = _cortex()
    _silence(cortex, calcium=0.0)
    cortex.process_input(generate_input_tensor(3, 3, random.Random(2)))
    assert not any(column.activated for row in cortex.columns for column in row)
    assert cortex.global_context == [0.0] * PATTERN_SIZE


def test_process_input_only_touches_covered_columns():
    cortex = _cortex(1, 3)
    cortex.process_input(generate_input_tensor(1, 1, random.Random(3)))
    assert cortex.columns[0][0].energy_level < 1.0
    assert cortex.columns[0][2].energy_level == 1.0


def test_empty_input_changes_nothing():
    cortex = _cortex()
    cortex.process_input([])
    assert all(column.energy_level == 1.0 for row in cortex.columns for column in row)
    assert cortex.global_context == [0.0] * PATTERN_SIZE


def test_lateral_inhibition_centre():
    grid = _grid(3, 3)
    grid[1][1].activated = True
    lateral_inhibition(grid)
    assert grid[1][1].energy_level == 1.0
    assert grid[1][1].activation == 1.0
    for i in range(3):
        for j in range(3):
            if (i, j) != (1, 1):
                assert grid[i][j].energy_level == pytest.approx(0.85)
                assert grid[i][j].activation == pytest.approx(0.9)


def test_lateral_inhibition_corner_reaches_three_neighbours():
    grid = _grid(3, 3)
    grid[0][0].activated = True
    lateral_inhibition(grid)
    damped = {
        (i, j) for i in range(3) for j in range(3) if grid[i][j].energy_level < 1.0
    }
    assert damped == {(0, 1), (1, 0), (1, 1)}


def test_suppress_weak_in_rows():
    cortex = _cortex(1, 3)
    for column, level in zip(cortex.columns[0], [1.0, 0.5, 0.8]):
        column.activation = level
        column.activated = True
    cortex.suppress_weak_in_rows()
    assert [c.activated for c in cortex.columns[0]] == [True, False, True]


def test_apply_attention_scales_within_focus():
    cortex = _cortex(1, 2)
    for column in cortex.columns[0]:
        column.activation = 0.5
    cortex.apply_attention([[1.0]])
    assert cortex.columns[0][0].activation == pytest.approx(1.0)
    assert cortex.columns[0][1].activation == pytest.approx(0.5)


def test_rest_cycle_recovers_energy_without_exceeding_one():
    cortex = _cortex()
    for row in cortex.columns:
        for column in row:
            column.energy_level = 0.1
    cortex.rest_cycle()
    for row in cortex.columns:
        for column in row:
            assert 0.6 <= column.energy_level <= 1.0
    cortex.rest_cycle()
    cortex.rest_cycle()
    assert all(column.energy_level == 1.0 for row in cortex.columns for column in row)


def test_update_astrocytes_keeps_levels_in_range():
    cortex = _cortex()
    for astrocyte in cortex.astrocytes:
        astrocyte.energy_reserve = 0.5
    cortex.update_astrocytes()
    for astrocyte in cortex.astrocytes:
        assert isinstance(astrocyte, Astrocyte)
        assert 0.0 <= astrocyte.calcium_level <= 1.0
        assert astrocyte.energy_reserve == pytest.approx(0.52)