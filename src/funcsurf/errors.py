"""Exceptions raised by funcsurf.

Degenerate surface data never raises; these cover programming and
configuration mistakes only.
"""


class FuncSurfError(Exception):
    """Base class for all funcsurf errors."""


class GridShapeError(FuncSurfError, ValueError):
    """A sample grid was built from rows of unequal length."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"row {row} has {actual} entries, expected {expected}"
        )


class ConfigError(FuncSurfError):
    """A viewer settings file could not be loaded or validated."""


class UnknownPresetError(FuncSurfError, KeyError):
    """No preset surface carries the requested title."""

    def __init__(self, title: str, known):
        self.title = title
        self.known = list(known)
        super().__init__(title)

    def __str__(self) -> str:
        return f"unknown preset {self.title!r}; choose one of: {', '.join(self.known)}"
