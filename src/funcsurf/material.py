"""Surface material: a vertical color ramp plus a specular highlight.

The ramp runs along the texture V axis from dark at ``v = 1`` (lowest
function values) through orange to amber at ``v = 0`` (highest values).
The same material is applied to front and back faces so the surface
reads correctly from either side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGBA = Tuple[float, float, float, float]


def parse_argb(text: str) -> RGBA:
    """Parse ``#AARRGGBB`` or ``#RRGGBB`` into an RGBA tuple of floats in [0, 1]."""

    digits = text.lstrip("#")
    if len(digits) == 6:
        digits = "FF" + digits
    if len(digits) != 8:
        raise ValueError(f"bad color {text!r}")
    try:
        a, r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    except ValueError:
        raise ValueError(f"bad color {text!r}") from None
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


@dataclass(frozen=True)
class GradientStop:
    color: RGBA
    offset: float


@dataclass(frozen=True)
class SurfaceMaterial:
    stops: Tuple[GradientStop, ...]
    specular_color: RGBA
    specular_power: float
    double_sided: bool = True
    desc: str = ""

    def color_at(self, t: float) -> RGBA:
        """Ramp color at offset ``t``, clamped to the first and last stop."""

        stops = self.stops
        if t <= stops[0].offset:
            return stops[0].color
        for lo, hi in zip(stops, stops[1:]):
            if t <= hi.offset:
                span = hi.offset - lo.offset
                w = 0.0 if span <= 0.0 else (t - lo.offset) / span
                return tuple(a + (b - a) * w for a, b in zip(lo.color, hi.color))
        return stops[-1].color

    def color_for_tex(self, u: float, v: float) -> RGBA:
        """Diffuse color at texture coordinate ``(u, v)``; ``u`` has no effect."""
        return self.color_at(1.0 - v)


## the ember ramp used for every surface
EMBER = SurfaceMaterial(
    stops=(GradientStop(parse_argb("#FF14141C"), 0.0),
           GradientStop(parse_argb("#FFEF6C00"), 0.55),
           GradientStop(parse_argb("#FFFFC107"), 1.0)),
    specular_color=(1.0, 1.0, 1.0, 200 / 255.0),
    specular_power=20.0,
    double_sided=True,
    desc="dark to orange to amber ramp with white highlight",
)


__all__ = ["RGBA", "parse_argb", "GradientStop", "SurfaceMaterial", "EMBER"]
