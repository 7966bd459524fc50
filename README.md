# nlregress

Fit a non-linear model to a small two-dimensional data set using batch
gradient descent, and watch the fitted curve settle onto the data in a
window.

The model has ten parameters `p0` … `p9`:

    y = p0·sin(p1·x) + p2·e^(−p3·x²) + p4·log10(1 + p5·x²)
        + p6·x³ + p7·x² + p8·x + p9

`e` is taken as `2.71828`. Where `1 + p5·x²` is not positive, the logarithm
is taken of `1e-9` instead. Gradients are estimated by forward finite
differences (step `0.001`) and parameters move by a learning rate of
`0.0001` per step. The loss is the mean squared error over the data set.
The starting parameters are all zero except `p4 = 1`.

## Installation

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Running

Prepare a file of `x,y` lines, for example `data.txt`:

    0.0,0.1
    0.5,0.6
    1.0,0.9

Each line is a number, one separator character and a number; lines that do
not match are skipped. Then start the viewer:

    nlregress

By default it reads `data.txt` from the working directory and takes 20
points. Both can be changed:

    nlregress points.csv --size 12

If the file holds fewer points than `--size`, a warning is shown and the
missing points are filled with `(0, 0)`. If the file cannot be opened, or
all points share the same `x` or the same `y` (so the plot cannot be
scaled), an error is printed and the command exits with status 1.

The window is 550×550 pixels. Data points are drawn in red and the current
model curve in green; one gradient-descent step runs per frame, and the loss
is printed about every thousand frames. Close the window or press Escape to
stop; the final parameters are then printed as a bracketed list.

## Library use

```python
from nlregress.config import initial_parameters
from nlregress.formulas import (
    load_data_from_file,
    loss_func,
    batch_gradient_descent_step,
)

data = load_data_from_file("data.txt", 20)
para = initial_parameters()
for _ in range(1000):
    para = batch_gradient_descent_step(para, data)
print(loss_func(para, data))
```

`batch_gradient_descent_step` returns a new parameter list and leaves its
argument unchanged.

`nlregress.config` holds the constants (`ALPHA`, `EPSILON`, `EULER`,
`THRESHOLD`, `SIZE`, `PARAMS`, `WIDTH`, `HEIGHT`, `EDGE`) and
`initial_parameters()`.

`nlregress.formulas` also provides:

- `Pair` — a dataclass with `x` and `y`, both defaulting to `0.0`;
- `hypothesis(x, para)` — the model value at `x`;
- `loss_gradient(para, data, index)` — the finite-difference derivative of
  the loss for one parameter;
- `threshold(num1, num2)` — whether two numbers differ by less than
  `0.0001`;
- `truncated_sum(arr)` — a sum whose running total is truncated to an
  integer after each addition;
- `find_max(points)` and `find_min(points)` — component-wise bounds of a
  non-empty list of pairs (`ValueError` if it is empty).

`loss_func` raises `ValueError` for an empty data set.

`nlregress.app` provides `scale_points(data, lo, hi)` and
`sample_curve(para, lo, hi)`, which map data points and the model curve to
screen coordinates, `format_parameters(para)`, which renders a parameter
list, and `main(argv=None)`, the entry point of the `nlregress` command.

## Limits

Descent runs only while the window is open: the command has no headless
mode, no stopping rule based on convergence, and does not save the fitted
parameters anywhere other than printing them.