"""Presentation constants and viewer settings.

The normalization constants frame every surface in the same display
volume regardless of the scale of the sampled function: the two input
parameters span 3.5 units each on the ground plane and the function value
spans 2.4 units vertically.

Viewer settings can be overridden from a YAML file::

    width: 1024
    height: 768
    rotation_sensitivity: 0.25
    background: [0.05, 0.05, 0.07]
    preset: Gaussian Hill
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, NamedTuple, Tuple

import yaml

from funcsurf.errors import ConfigError


class Spans(NamedTuple):
    """Target extent of the display volume for each input axis."""

    x: float
    y: float
    z: float


## display volume extent for input x, input y and function value z
TARGET_SPANS = Spans(x=3.5, y=3.5, z=2.4)

## floor applied to a zero-width coordinate range before dividing by it
RANGE_EPSILON = 0.0001

## degrees of rotation per pixel of pointer travel
ROTATION_SENSITIVITY = 0.4

## starting orientation, slightly tilted towards the viewer
INITIAL_YAW = -35.0
INITIAL_PITCH = 35.0


@dataclass
class ViewerSettings:
    """Knobs for the interactive pyglet viewer."""

    width: int = 1100
    height: int = 760
    caption: str = "funcsurf"
    camera_distance: float = 9.0
    field_of_view: float = 45.0
    background: Tuple[float, float, float] = (0.08, 0.08, 0.11)
    rotation_sensitivity: float = ROTATION_SENSITIVITY
    initial_yaw: float = INITIAL_YAW
    initial_pitch: float = INITIAL_PITCH
    spans: Spans = TARGET_SPANS
    preset: str = "Sine × Cosine"


def _coerce(name: str, default: Any, value: Any) -> Any:
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"setting {name!r} must be true or false, got {value!r}")
        return value
    if isinstance(default, tuple):
        if (not isinstance(value, (list, tuple)) or len(value) != len(default) or
                not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)):
            raise ConfigError(
                f"setting {name!r} must be a list of {len(default)} numbers, got {value!r}")
        coerced = tuple(float(v) for v in value)
        if isinstance(default, Spans):
            if min(coerced) <= 0.0:
                raise ConfigError(f"setting {name!r} must be positive, got {value!r}")
            return Spans(*coerced)
        return coerced
    if isinstance(default, int) and not isinstance(default, bool):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigError(f"setting {name!r} must be a positive integer, got {value!r}")
        return value
    if isinstance(default, float):
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ConfigError(f"setting {name!r} must be a number, got {value!r}")
        return float(value)
    if isinstance(default, str):
        if not isinstance(value, str):
            raise ConfigError(f"setting {name!r} must be a string, got {value!r}")
        return value
    raise ConfigError(f"unsupported setting {name!r}")  # pragma: no cover


def settings_from_dict(data: Dict[str, Any], base: ViewerSettings | None = None) -> ViewerSettings:
    """Return ``base`` (or the defaults) updated with the values in ``data``."""

    if base is None:
        base = ViewerSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"settings must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(ViewerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown settings: {', '.join(map(str, unknown))}")

    updates = {name: _coerce(name, getattr(base, name), value)
               for name, value in data.items()}
    return replace(base, **updates)


def load_settings(path: Path | str) -> ViewerSettings:
    """Load viewer settings from a YAML file.

    An empty file yields the defaults.
    """

    settings_path = Path(path)
    if not settings_path.exists():
        raise ConfigError(f"settings file not found: {settings_path}")
    with settings_path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"could not parse {settings_path}: {exc}") from exc
    return settings_from_dict(data)


__all__ = [
    "Spans",
    "TARGET_SPANS",
    "RANGE_EPSILON",
    "ROTATION_SENSITIVITY",
    "INITIAL_YAW",
    "INITIAL_PITCH",
    "ViewerSettings",
    "settings_from_dict",
    "load_settings",
]
