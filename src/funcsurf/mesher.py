"""Turn a grid of function samples into a normalized triangle mesh.

Each sample ``(x, y, z)`` becomes one vertex.  Coordinates are centered on
the bounding box of the present samples and rescaled per axis so that any
function fills the same display volume (see ``funcsurf.config``).  The
function value is presented as height: input ``x`` maps to the first
rendered axis, the value ``z`` to the second (up) and input ``y`` to the
third (depth).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from funcsurf.config import RANGE_EPSILON, TARGET_SPANS, Spans
from funcsurf.geometry_utils import Vec2, Vec3, add3, normalize3, triangle_cross
from funcsurf.grid import ORIGIN, SampleGrid

logger = logging.getLogger(__name__)

Tri = Tuple[int, int, int]

## rendered "up" direction, used for vertices with no usable face normal
UP: Vec3 = (0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extents of the present samples, in input coordinates."""

    minimum: Vec3
    maximum: Vec3

    def ranges(self, eps: float = RANGE_EPSILON) -> Vec3:
        """Per-axis widths, floored at ``eps``."""
        return tuple(max(hi - lo, eps) for lo, hi in zip(self.minimum, self.maximum))

    def center(self) -> Vec3:
        return tuple((lo + hi) * 0.5 for lo, hi in zip(self.minimum, self.maximum))


@dataclass(frozen=True)
class Mesh:
    """Indexed triangle mesh with one texture coordinate per vertex.

    ``positions`` and ``tex_coords`` follow the row-major order of the
    source grid, so vertex ``r * cols + c`` comes from grid entry
    ``(r, c)``.
    """

    positions: Tuple[Vec3, ...]
    tex_coords: Tuple[Vec2, ...]
    triangles: Tuple[Tri, ...]
    rows: int = 0
    cols: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.triangles

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def indices(self) -> List[int]:
        """Triangle indices flattened into a single list."""
        return [i for tri in self.triangles for i in tri]

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(positions, tex_coords, indices)`` as packed numpy arrays."""

        positions = np.asarray(self.positions, dtype=np.float32).reshape(-1, 3)
        tex_coords = np.asarray(self.tex_coords, dtype=np.float32).reshape(-1, 2)
        indices = np.asarray(self.triangles, dtype=np.uint32).reshape(-1)
        return positions, tex_coords, indices


## sentinel for "nothing to render"
EMPTY_MESH = Mesh(positions=(), tex_coords=(), triangles=())


def compute_bounds(grid: SampleGrid) -> Optional[Bounds]:
    """Return the extents of the present samples, or ``None`` if there are none."""

    inf = float("inf")
    lo = [inf, inf, inf]
    hi = [-inf, -inf, -inf]
    for p in grid.present():
        for axis, value in enumerate((p.x, p.y, p.z)):
            if value < lo[axis]:
                lo[axis] = value
            if value > hi[axis]:
                hi[axis] = value

    if any(v == inf for v in lo):
        return None
    return Bounds(minimum=tuple(lo), maximum=tuple(hi))


def grid_triangles(rows: int, cols: int) -> List[Tri]:
    """Two triangles per grid cell, wound ``(tl, bl, tr)`` then ``(tr, bl, br)``."""

    tris: List[Tri] = []
    for r in range(rows - 1):
        for c in range(cols - 1):
            top_left = r * cols + c
            top_right = top_left + 1
            bottom_left = (r + 1) * cols + c
            bottom_right = bottom_left + 1
            tris.append((top_left, bottom_left, top_right))
            tris.append((top_right, bottom_left, bottom_right))
    return tris


def build_mesh(grid: SampleGrid,
               spans: Spans = TARGET_SPANS,
               eps: float = RANGE_EPSILON) -> Mesh:
    """Normalize ``grid`` into a renderable mesh.

    Returns ``EMPTY_MESH`` when the grid has fewer than two rows or
    columns, or when every entry is missing.  Missing entries are placed
    at the origin so that vertex indices stay aligned with the grid.
    """

    rows, cols = grid.shape
    if rows < 2 or cols < 2:
        logger.debug("grid %dx%d too small to mesh", rows, cols)
        return EMPTY_MESH

    bounds = compute_bounds(grid)
    if bounds is None:
        logger.debug("grid %dx%d has no samples", rows, cols)
        return EMPTY_MESH

    range_x, range_y, range_z = bounds.ranges(eps)
    center_x, center_y, center_z = bounds.center()
    min_x, _, min_z = bounds.minimum

    x_scale = spans.x / range_x
    y_scale = spans.y / range_y
    z_scale = spans.z / range_z

    positions: List[Vec3] = []
    tex_coords: List[Vec2] = []
    for entry in grid:
        p = ORIGIN if entry is None else entry
        # function value is "up"; the second input parameter is depth
        positions.append(((p.x - center_x) * x_scale,
                          (p.z - center_z) * z_scale,
                          (p.y - center_y) * y_scale))
        tex_coords.append(((p.x - min_x) / range_x,
                           1.0 - (p.z - min_z) / range_z))

    triangles = grid_triangles(rows, cols)
    logger.debug("meshed %dx%d grid: %d vertices, %d triangles",
                 rows, cols, len(positions), len(triangles))
    return Mesh(positions=tuple(positions),
                tex_coords=tuple(tex_coords),
                triangles=tuple(triangles),
                rows=rows,
                cols=cols)


def vertex_normals(mesh: Mesh) -> List[Vec3]:
    """Return one unit normal per vertex.

    Face normals are accumulated unnormalized, which weights each face by
    its area.  Vertices without a usable normal point up.
    """

    sums: List[Vec3] = [(0.0, 0.0, 0.0)] * mesh.vertex_count
    pos = mesh.positions
    for i0, i1, i2 in mesh.triangles:
        n = triangle_cross(pos[i0], pos[i1], pos[i2])
        sums[i0] = add3(sums[i0], n)
        sums[i1] = add3(sums[i1], n)
        sums[i2] = add3(sums[i2], n)
    return [normalize3(s) or UP for s in sums]


__all__ = [
    "Bounds",
    "Mesh",
    "EMPTY_MESH",
    "compute_bounds",
    "grid_triangles",
    "build_mesh",
    "vertex_normals",
]
