"""The regression model, its loss, gradient descent and small data helpers."""

from __future__ import annotations

import math
import re
import warnings
from dataclasses import dataclass
from pathlib import Path

from nlregress.config import ALPHA, EPSILON, EULER, THRESHOLD

_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_LINE = re.compile(rf"^\s*({_FLOAT})\s*(\S)\s*({_FLOAT})")


@dataclass
class Pair:
    """A two-dimensional value, used for data points and bounds."""

    x: float = 0.0
    y: float = 0.0


def load_data_from_file(filename, size):
    """Read up to ``size`` points written as ``x<sep>y`` lines.

    Lines that do not parse are skipped. If fewer than ``size`` points are
    found, a warning is issued and the list is padded with ``Pair(0, 0)``.
    """
    points = []
    with Path(filename).open(encoding="utf-8") as handle:
        for line in handle:
            if len(points) >= size:
                break
            match = _LINE.match(line)
            if match:
                points.append(Pair(float(match.group(1)), float(match.group(3))))
    if len(points) < size:
        warnings.warn(
            f"Only {len(points)} data points loaded, expected {size}",
            stacklevel=2,
        )
        points.extend(Pair() for _ in range(size - len(points)))
    return points


def hypothesis(x, para):
    """Evaluate the model at ``x`` with parameters ``para``."""
    log_arg = 1 + para[5] * x**2
    if log_arg <= 0:
        # keep log10 defined
        log_arg = 1e-9
    return (
        para[0] * math.sin(para[1] * x)
        + para[2] * EULER ** (-para[3] * x**2)
        + para[4] * math.log10(log_arg)
        + para[6] * x**3
        + para[7] * x**2
        + para[8] * x
        + para[9]
    )


def loss_func(para, data):
    """Mean squared error of the model over ``data``."""
    if not data:
        raise ValueError("loss is undefined for an empty data set")
    return sum((hypothesis(p.x, para) - p.y) ** 2 for p in data) / len(data)


def loss_gradient(para, data, index):
    """Forward-difference estimate of the loss derivative for parameter ``index``."""
    shifted = list(para)
    shifted[index] += EPSILON
    return (loss_func(shifted, data) - loss_func(para, data)) / EPSILON


def batch_gradient_descent_step(para, data):
    """Return the parameters after one step of batch gradient descent."""
    gradient = [loss_gradient(para, data, index) for index in range(len(para))]
    return [value - ALPHA * grad for value, grad in zip(para, gradient)]


def threshold(num1, num2):
    """Whether two numbers differ by less than the convergence threshold."""
    return abs(num1 - num2) < THRESHOLD


def truncated_sum(arr):
    """Sum values into an integer accumulator, truncating after each addition."""
    total = 0
    for value in arr:
        total = int(total + value)
    return float(total)


def find_max(points):
    """Component-wise maximum of a non-empty sequence of pairs."""
    if not points:
        raise ValueError("cannot take the maximum of no points")
    return Pair(max(p.x for p in points), max(p.y for p in points))


def find_min(points):
    """Component-wise minimum of a non-empty sequence of pairs."""
    if not points:
        raise ValueError("cannot take the minimum of no points")
    return Pair(min(p.x for p in points), min(p.y for p in points))