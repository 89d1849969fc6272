"""Titled function surfaces offered by the viewer."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, exp, pi, sin, sqrt
from typing import Iterable, List, Optional

from funcsurf.errors import UnknownPresetError
from funcsurf.grid import SampleGrid
from funcsurf.sampler import sample_surface


@dataclass(frozen=True)
class FunctionSurface:
    """A sampled surface with a display title and description."""

    title: str
    grid: SampleGrid
    description: str = ""

    def __post_init__(self):
        if self.title is None:
            raise TypeError("title is required")
        if self.grid is None:
            raise TypeError("grid is required")
        if self.description is None:
            object.__setattr__(self, "description", "")


def _ripple(x: float, y: float) -> float:
    r = sqrt(x * x + y * y)
    return sin(r) / (r + 1)


def default_surfaces() -> List[FunctionSurface]:
    """Sample the built-in surfaces."""

    return [
        FunctionSurface(
            "Sine × Cosine",
            sample_surface(lambda x, y: sin(x) * cos(y), (-pi, pi), 45, (-pi, pi), 45),
            "A smooth wave created from sin(x) · cos(y) sampled within ±π."),
        FunctionSurface(
            "Gaussian Hill",
            sample_surface(lambda x, y: exp(-(x * x + y * y) / 3.0), (-3, 3), 40, (-3, 3), 40),
            "A radial Gaussian bump: exp(-(x² + y²) / 3)."),
        FunctionSurface(
            "Hyperbolic Saddle",
            sample_surface(lambda x, y: (x * x - y * y) / 4.0, (-2.5, 2.5), 40, (-2.5, 2.5), 40),
            "The classic saddle surface x² - y² rendered over ±2.5."),
        FunctionSurface(
            "Ripple Bowl",
            sample_surface(_ripple, (-6, 6), 50, (-6, 6), 50),
            "Circular ripples given by sin(r) / (r + 1) where r = √(x² + y²)."),
    ]


def find_preset(title: str,
                surfaces: Optional[Iterable[FunctionSurface]] = None) -> FunctionSurface:
    """Return the surface called ``title`` (case-insensitive)."""

    if surfaces is None:
        surfaces = default_surfaces()
    surfaces = list(surfaces)
    wanted = title.casefold()
    for surface in surfaces:
        if surface.title.casefold() == wanted:
            return surface
    raise UnknownPresetError(title, [s.title for s in surfaces])


__all__ = ["FunctionSurface", "default_surfaces", "find_preset"]
