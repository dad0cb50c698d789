# bemkit

Small numerical helpers for boundary element computations. The package
has two modules:

- `bemkit.utilities`: complex matrix manipulation, one-dimensional
  intervals, supports and partitions, plane waves, the Hankel function of
  the first kind of order zero, and a few small vector helpers.
- `bemkit.progressbar`: a plain text progress bar that redraws itself in
  place with backspaces.

## Installation

```
pip install bemkit
```

To run the tests as well:

```
pip install "bemkit[test]"
pytest
```

## Utilities

```python
import numpy as np
from bemkit.utilities import (
    Direction, product, find_index, hankel0_1, intersect, distance,
    stretch, compress, tensorize, plane_wave,
)

a = np.array([[0.0, 1.0, 0.3], [1.0, -2.0, 3.0]])
b = np.array([[1.0, 1.0], [0.0, -0.5], [3.0, 0.0]])
product(a, b)              # complex array [[0.9, -0.5], [10.0, 2.0]]

find_index([0.0, 0.25, 0.5, 0.75, 1.0], 0.5, Direction.LEFT)   # 1
find_index([0.0, 0.25, 0.5, 0.75, 1.0], 0.5, Direction.RIGHT)  # 2

intersect((0.0, 0.5), (0.25, 1.0))   # (0.25, 0.5)
distance((0.0, 0.2), (0.5, 1.0))     # 0.3

m = np.arange(4).reshape(2, 2)
compress(stretch(m))                 # m again, as a complex array (column-major order)

tensorize([[0, 1], [10, 20]])        # [[0, 10], [1, 10], [0, 20], [1, 20]]

hankel0_1(1.0)                       # H_0^(1)(1)
wave = plane_wave(0.15, 2.0)
wave(0.1, 0.2)                       # exp(i k (sin(a) x - cos(a) y))
```

Matrix helpers accept anything NumPy can turn into a two-dimensional
array and return complex NumPy arrays. They raise `ValueError` on shapes
that do not fit (a non-square matrix, mismatched inner dimensions, a
vector whose length is not a perfect square).

Further helpers:

- `cexp(t)`: `exp(t)` for a complex `t`, `exp(i t)` for a real one.
- `max_vector_index(vec)`: index of the first entry of largest modulus.
- `infty_error(original, approximation, relative=False)` and
  `p_error(original, approximation, relative=False)`: largest entrywise
  and Frobenius-norm differences between two matrices.
- `conjugate(vec)`, `transpose(matrix)` (without conjugation).
- `reduce_matrices(full_matrices, reduced_basis)`: `B^H A B` for each `A`.
- `square_diagonal`, `sqrt_diagonal`, `invert_diagonal`: return a copy of
  a square matrix with its non-zero diagonal entries transformed.
- `basis_vector(i, size)`: unit vector as a list of complex numbers.
- `l2_norm(function)`: approximate norm on [0, 1] from 1999 samples.
- `join(sup1, sup2)` and `remove(sup1, sup2)`: merge or subtract lists of
  `(key, value)` pairs by key; duplicate keys in `sup1` raise `ValueError`.
- `plot_function(file_name, function)`: writes 200 lines of
  `position real imag` for positions in [0, 1) to `<file_name>.txt` and
  returns its path.
- `affine_combination(vec, point)`, `linear_combination(vec, point)`,
  `vector_norm(vec)`.
- `get_env_bool(name)`: true only when the variable is set to `true`.
- `get_env_int(name)`: the leading integer of the variable, `-1` when it
  is unset, `ValueError` when it does not start with an integer.
- `now()` and `time_difference(time1, time2)`: wall-clock time and the
  whole milliseconds between two such times.

## Progress bar

```python
import sys
from bemkit.progressbar import ProgressBar

bar = ProgressBar(100, show_bar=True, output=sys.stderr)
for _ in range(100):
    bar.update()
```

The output stream defaults to standard error. `set_niter` changes the
number of iterations (a value that is zero or negative raises
`ValueError`), and `reset` starts the bar again from zero. Calling
`update` before a number of iterations is set raises `RuntimeError`.
The characters used are the attributes `done_char`, `todo_char`,
`opening_bracket_char` and `closing_bracket_char`; setting `show_bar` to
`False` prints the percentage alone. The bar should be the only thing
writing to its stream while it runs.

## What this package does not do

bemkit holds helpers only. It has no curves or meshes, no discrete
function spaces, no quadrature rules, no Green's functions or integral
operators, and no problem solver; there is no command-line program.