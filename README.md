# cortexsim

A small simulation of a patch of cortex. The patch is a grid of minicolumns. Each
minicolumn holds twelve neurons. Every neuron has eight complex-valued dendritic
weights and five real-valued context weights. Astrocytes supply energy and
calcium modulation to groups of four columns. The package also provides Hebbian
learning, dopamine modulation, memory consolidation and two kinds of inhibition
between columns.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cortexsim
cortexsim --seed 42
```

The command runs the demonstration on a 3x3 cortex and writes a report to
standard output. The report is in Russian. The run has two phases.

1. Twenty training steps use the same input grid every time. Each step:
   - updates the astrocytes and processes the input;
   - prints the state of every column;
   - applies Hebbian learning to the active columns, with a rate that decays as
     `0.3 * exp(-step / 20)` and never falls below 0.1;
   - applies dopamine modulation (a factor of 1.2) to the active columns;
   - consolidates all neurons;
   - prints the number of active columns, the largest activation so far, the
     learning rate and an energy map.

   A rest cycle follows every fifth step. At the end of the phase the command
   prints the total and average number of activations.
2. Fifteen steps then use a freshly generated input grid each time. A rest cycle
   with an energy map follows every third step.

`--seed` seeds the random generator, so a run can be repeated exactly. Without
it each run differs. The command can also be started with
`python -m cortexsim.cli`.

## Library use

```python
import random

from cortexsim.cortex import Cortex
from cortexsim.patterns import generate_input_tensor
from cortexsim.learning import apply_dopamine, consolidate
from cortexsim.cli import apply_learning, adjust_learning_rate, format_energy_grid

rng = random.Random(42)
cortex = Cortex(3, 3, rng=rng)
inputs = generate_input_tensor(3, 3, rng)

cortex.update_astrocytes()
cortex.process_input(inputs)
apply_learning(cortex, inputs, adjust_learning_rate(0))

for row in cortex.columns:
    for column in row:
        if column.activated:
            apply_dopamine(column, 1.2)
        for neuron in column.neurons:
            consolidate(neuron)

print(format_energy_grid(cortex))
```

### Building blocks

- `cortexsim.astrocyte`
  - `Astrocyte` has a calcium level that follows a 0.5 Hz wave with a little
    noise, and an energy reserve. The class provides `update()`,
    `transfer_energy()` (hands over at most 0.5, or 80% of the reserve) and
    `rest()`.
  - For tests, the clock and the random generator can be passed in.
  - `EnergySource` is the protocol a minicolumn expects of its astrocyte.
- `cortexsim.neuron`
  - `Neuron.random(rng)` creates a neuron with random weights.
  - `Neuron.activation(inputs, context)` returns a sigmoid-normalised response.
- `cortexsim.minicolumn`
  - `Minicolumn.create(astrocyte, rng)` builds a column of random neurons.
  - `activation_threshold()` rises from 0.6 as energy falls. It is clamped to the
    range 0.55 to 0.85.
  - `process_pattern(inputs, context)` updates `activated`, `activation` and
    `energy_level`. A column with less than 0.2 energy draws energy from its
    astrocyte.
  - `rest()` recovers energy.
- `cortexsim.cortex`
  - `Cortex(rows, cols, rng=None, clock=time.monotonic)` is the grid of columns
    with a shared `global_context`.
  - Its methods are `update_astrocytes()`, `process_input(inputs)`,
    `apply_attention(focus)`, `rest_cycle()` and `suppress_weak_in_rows()`.
    `suppress_weak_in_rows()` deactivates columns below 70% of the strongest
    column in their row.
  - The module function `lateral_inhibition(columns)` dampens the neighbours of
    every active column. `process_input` applies it after feeding the patterns.
- `cortexsim.learning`
  - `apply_hebbian_learning(neuron, inputs, context, learning_rate)`
  - `consolidate(neuron)` caps dendrite magnitudes at 5 and applies `tanh` to
    the context weights.
  - `apply_dopamine(column, multiplier)`
- `cortexsim.patterns`
  - `generate_pattern(rng)` returns five noisy points on the unit circle.
  - `generate_input_tensor(rows, cols, rng)` returns a grid of such patterns.
  - `complex_norm(vec)` returns a copy of the vector scaled to unit length.
- `cortexsim.cli`
  - The pieces of the demonstration: `adjust_learning_rate`,
    `format_cortex_state`, `format_energy_grid`, `apply_learning`,
    `consolidate_memory`, `run_simulation(rng, out)` and `main(argv)`.
  - `run_simulation` writes its report to `out` and returns the total number of
    activations from the training phase.

Every function that draws random values takes a `random.Random`.

## What it does not do

The package only runs the fixed demonstration and offers the pieces above. It
cannot:

- save or load learned weights;
- read input patterns from files;
- plot results;
- change the grid size or the number of steps from the command line.