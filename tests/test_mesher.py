import math

import numpy as np
import pytest

from funcsurf.config import RANGE_EPSILON, TARGET_SPANS
from funcsurf.grid import SampleGrid
from funcsurf.mesher import (
    EMPTY_MESH,
    build_mesh,
    compute_bounds,
    grid_triangles,
    vertex_normals,
)
from funcsurf.sampler import sample_surface


def _flat_plane():
    # x along rows, y along columns, z = 0 everywhere
    return SampleGrid.from_triples([[(x, y, 0.0) for y in (-1, 0, 1)]
                                    for x in (-1, 0, 1)])


def _wave(rows=6, cols=5):
    return sample_surface(lambda x, y: math.sin(x) * math.cos(y),
                          (-2.0, 2.0), rows, (-1.0, 3.0), cols)


@pytest.mark.parametrize("rows", [
    [],
    [[]],
    [[(0, 0, 0)]],
    [[(0, 0, 0), (1, 0, 0)]],
    [[(0, 0, 0)], [(1, 0, 0)]],
])
def test_small_grids_are_empty(rows):
    assert build_mesh(SampleGrid.from_triples(rows)) is EMPTY_MESH


def test_all_missing_grid_is_empty():
    grid = SampleGrid([[None, None], [None, None]])
    assert compute_bounds(grid) is None
    assert build_mesh(grid) is EMPTY_MESH


def test_empty_mesh_sentinel():
    assert EMPTY_MESH.is_empty
    assert EMPTY_MESH.vertex_count == 0
    positions, uvs, indices = EMPTY_MESH.as_arrays()
    assert positions.shape == (0, 3)
    assert uvs.shape == (0, 2)
    assert indices.shape == (0,)


@pytest.mark.parametrize("rows,cols", [(2, 2), (3, 7), (6, 5)])
def test_counts_and_index_bounds(rows, cols):
    mesh = build_mesh(_wave(rows, cols))
    assert mesh.vertex_count == rows * cols
    assert len(mesh.tex_coords) == rows * cols
    assert mesh.triangle_count == (rows - 1) * (cols - 1) * 2
    assert all(0 <= i < rows * cols for i in mesh.indices)


def test_rebuild_is_identical():
    grid = _wave()
    assert build_mesh(grid) == build_mesh(grid)


def test_scale_does_not_change_normalized_positions():
    grid = _wave()
    base = build_mesh(grid)
    scaled = build_mesh(grid.scaled(7.5))
    for a, b in zip(base.positions, scaled.positions):
        assert a == pytest.approx(b, abs=1e-9)
    for a, b in zip(base.tex_coords, scaled.tex_coords):
        assert a == pytest.approx(b, abs=1e-9)


def test_positions_fill_target_volume():
    positions = np.asarray(build_mesh(_wave(9, 9)).positions)
    extent = positions.max(axis=0) - positions.min(axis=0)
    # rendered axes are (input x, value z, input y)
    assert extent[0] == pytest.approx(TARGET_SPANS.x)
    assert extent[1] == pytest.approx(TARGET_SPANS.z)
    assert extent[2] == pytest.approx(TARGET_SPANS.y)
    assert positions.min(axis=0) == pytest.approx(-positions.max(axis=0))


def test_value_maps_to_up_axis():
    grid = SampleGrid.from_triples([[(0, 0, 0), (0, 1, 0)],
                                    [(1, 0, 0), (1, 1, 10)]])
    mesh = build_mesh(grid)
    # highest sample is the highest vertex, and the brightest end of the ramp
    top = max(range(mesh.vertex_count), key=lambda i: mesh.positions[i][1])
    assert top == 3
    assert mesh.positions[3] == pytest.approx((1.75, 1.2, 1.75))
    assert mesh.tex_coords[3] == pytest.approx((1.0, 0.0))
    assert mesh.tex_coords[0] == pytest.approx((0.0, 1.0))


def test_missing_entries_become_origin():
    grid = SampleGrid.from_triples([[(2, 2, 1), (2, 4, 1)],
                                    [(4, 2, 3), None]])
    mesh = build_mesh(grid)
    assert mesh.vertex_count == 4
    # bounds ignore the missing entry: x, y in [2, 4], z in [1, 3]
    assert mesh.positions[3] == pytest.approx(((0 - 3) * 1.75, (0 - 2) * 1.2, (0 - 3) * 1.75))
    assert mesh.tex_coords[3] == pytest.approx((-1.0, 1.5))


def test_flat_plane_example():
    mesh = build_mesh(_flat_plane())
    assert {p[1] for p in mesh.positions} == {0.0}
    assert all(uv[1] == 1.0 for uv in mesh.tex_coords)
    assert mesh.positions[0] == pytest.approx((-1.75, 0.0, -1.75))
    assert mesh.positions[8] == pytest.approx((1.75, 0.0, 1.75))
    assert list(mesh.triangles) == [
        (0, 3, 1), (1, 3, 4),
        (1, 4, 2), (2, 4, 5),
        (3, 6, 4), (4, 6, 7),
        (4, 7, 5), (5, 7, 8),
    ]


def test_degenerate_range_uses_epsilon():
    grid = SampleGrid.from_triples([[(1, 1, 5), (1, 2, 5)],
                                    [(2, 1, 5), (2, 2, 5.00005)]])
    mesh = build_mesh(grid)
    # z range 0.00005 is floored to the epsilon
    assert mesh.positions[3][1] == pytest.approx((0.00005 - 0.000025) * TARGET_SPANS.z / RANGE_EPSILON)


def test_grid_triangle_winding():
    assert grid_triangles(2, 2) == [(0, 2, 1), (1, 2, 3)]
    assert grid_triangles(1, 5) == []


def test_vertex_normals_on_flat_plane():
    normals = vertex_normals(build_mesh(_flat_plane()))
    assert len(normals) == 9
    for n in normals:
        assert abs(n[1]) == pytest.approx(1.0)


def test_vertex_normals_are_unit_length():
    for n in vertex_normals(build_mesh(_wave())):
        assert math.sqrt(sum(c * c for c in n)) == pytest.approx(1.0)


def test_as_arrays_layout():
    mesh = build_mesh(_wave(3, 4))
    positions, uvs, indices = mesh.as_arrays()
    assert positions.dtype == np.float32 and positions.shape == (12, 3)
    assert uvs.dtype == np.float32 and uvs.shape == (12, 2)
    assert indices.dtype == np.uint32 and indices.shape == (2 * 3 * 2 * 3,)
    assert indices.tolist() == mesh.indices
