"""Evaluate a bivariate function over a rectangular parameter grid."""

from __future__ import annotations

import logging
from math import isfinite
from typing import Callable, List, Optional, Tuple

from funcsurf.grid import SampleGrid, SamplePoint

logger = logging.getLogger(__name__)

Function2D = Callable[[float, float], float]
Range = Tuple[float, float]


def lerp(lo: float, hi: float, index: int, total: int) -> float:
    """Value ``index`` of ``total`` evenly spaced values from ``lo`` to ``hi``.

    A single-step range collapses to ``lo``.
    """

    if total <= 1:
        return float(lo)
    t = index / float(total - 1)
    return lo + (hi - lo) * t


def _evaluate(func: Function2D, x: float, y: float) -> Optional[SamplePoint]:
    try:
        z = float(func(x, y))
    except (ArithmeticError, ValueError) as exc:
        logger.debug("f(%g, %g) failed: %s", x, y, exc)
        return None
    if not isfinite(z):
        logger.debug("f(%g, %g) is not finite", x, y)
        return None
    return SamplePoint(x, y, z)


def sample_surface(func: Function2D,
                   x_range: Range, x_steps: int,
                   y_range: Range, y_steps: int) -> SampleGrid:
    """Sample ``func`` into a grid with ``x_steps`` rows and ``y_steps`` columns.

    Row ``i`` holds the samples at the ``i``-th x value.  Samples whose
    evaluation fails with an arithmetic error or yields a non-finite value
    are left missing.
    """

    if x_steps < 0 or y_steps < 0:
        raise ValueError(f"step counts must be non-negative, got {x_steps}, {y_steps}")

    x_min, x_max = x_range
    y_min, y_max = y_range
    rows: List[List[Optional[SamplePoint]]] = []
    missing = 0
    for xi in range(x_steps):
        x = lerp(x_min, x_max, xi, x_steps)
        row = []
        for yi in range(y_steps):
            y = lerp(y_min, y_max, yi, y_steps)
            sample = _evaluate(func, x, y)
            if sample is None:
                missing += 1
            row.append(sample)
        rows.append(row)

    if missing:
        logger.debug("%d of %d samples missing", missing, x_steps * y_steps)
    return SampleGrid(rows)


__all__ = ["Function2D", "lerp", "sample_surface"]
