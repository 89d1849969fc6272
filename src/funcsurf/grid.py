"""Sampled function values arranged on a rectangular grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from funcsurf.errors import GridShapeError


@dataclass(frozen=True)
class SamplePoint:
    """One evaluation ``z = f(x, y)`` of a bivariate function."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


ORIGIN = SamplePoint(0.0, 0.0, 0.0)

Entry = Optional[SamplePoint]


class SampleGrid:
    """Rectangular, row-major grid of optional sample points.

    ``None`` marks a missing sample.  Entry ``(r, c)`` neighbours
    ``(r +/- 1, c)`` and ``(r, c +/- 1)``.  Grids are immutable once built.
    """

    __slots__ = ("_rows", "_nrows", "_ncols")

    def __init__(self, rows: Iterable[Sequence[Entry]] = ()):
        frozen = tuple(tuple(row) for row in rows)
        ncols = len(frozen[0]) if frozen else 0
        for index, row in enumerate(frozen):
            if len(row) != ncols:
                raise GridShapeError(index, ncols, len(row))
            for entry in row:
                if entry is not None and not isinstance(entry, SamplePoint):
                    raise TypeError(f"grid entries must be SamplePoint or None, got {entry!r}")
        self._rows = frozen
        self._nrows = len(frozen)
        self._ncols = ncols

    @classmethod
    def from_triples(cls, rows: Iterable[Sequence[Optional[Sequence[float]]]]) -> "SampleGrid":
        """Build a grid from rows of ``(x, y, z)`` triples or ``None``."""

        return cls([[None if t is None else SamplePoint(float(t[0]), float(t[1]), float(t[2]))
                     for t in row]
                    for row in rows])

    def __repr__(self):
        return f"SampleGrid({self._nrows}x{self._ncols})"

    def __eq__(self, other):
        if not isinstance(other, SampleGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    @property
    def rows(self) -> int:
        return self._nrows

    @property
    def cols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._nrows, self._ncols)

    def __len__(self) -> int:
        return self._nrows * self._ncols

    def __getitem__(self, index: Tuple[int, int]) -> Entry:
        r, c = index
        return self._rows[r][c]

    def __iter__(self) -> Iterator[Entry]:
        """Iterate over every entry in row-major order, ``None`` included."""
        for row in self._rows:
            yield from row

    def present(self) -> Iterator[SamplePoint]:
        """Iterate over the samples that are not missing."""
        return (p for p in self if p is not None)

    def scaled(self, k: float) -> "SampleGrid":
        """Return a copy with every coordinate multiplied by ``k``."""
        return SampleGrid([[None if p is None else SamplePoint(p.x * k, p.y * k, p.z * k)
                            for p in row]
                           for row in self._rows])


__all__ = ["SamplePoint", "SampleGrid", "ORIGIN", "Entry"]
