from funcsurf.grid import SampleGrid
from funcsurf.mesher import EMPTY_MESH, build_mesh
from funcsurf.presets import FunctionSurface
from funcsurf.rotation import RotationController
from funcsurf.view import SurfaceView


def _grid(n=3, height=1.0):
    return SampleGrid.from_triples([[(x, y, height * x * y) for y in range(n)]
                                    for x in range(n)])


def test_starts_empty():
    view = SurfaceView()
    assert view.mesh is EMPTY_MESH
    assert view.grid is None
    assert view.rotation.yaw == -35.0


def test_set_grid_rebuilds_and_notifies():
    view = SurfaceView()
    seen = []
    view.subscribe(seen.append)
    grid = _grid()
    mesh = view.set_grid(grid)
    assert mesh == build_mesh(grid)
    assert view.mesh is mesh
    assert seen == [mesh]


def test_listener_sees_completed_mesh():
    view = SurfaceView()
    observed = []
    view.subscribe(lambda mesh: observed.append(view.mesh is mesh))
    view.set_grid(_grid(4))
    view.set_grid(_grid(2))
    assert observed == [True, True]


def test_undersized_grid_clears_mesh():
    view = SurfaceView()
    view.set_grid(_grid(3))
    assert view.set_grid(_grid(1)) is EMPTY_MESH
    assert view.set_grid(None) is EMPTY_MESH
    assert view.grid is None


def test_rotation_survives_rebuild():
    rc = RotationController()
    view = SurfaceView(rotation=rc)
    view.set_grid(_grid(3))
    rc.press((0, 0))
    rc.move((20, -10))
    yaw, pitch = rc.yaw, rc.pitch
    view.set_grid(_grid(5, height=4.0))
    assert (view.rotation.yaw, view.rotation.pitch) == (yaw, pitch)
    assert view.rotation.dragging


def test_unsubscribe():
    view = SurfaceView()
    seen = []
    unsubscribe = view.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    view.set_grid(_grid())
    assert seen == []


def test_set_surface():
    view = SurfaceView()
    surface = FunctionSurface("Saddle", _grid(4), "x * y")
    mesh = view.set_surface(surface)
    assert view.surface is surface
    assert view.grid is surface.grid
    assert mesh.triangle_count == 18
    view.set_surface(None)
    assert view.surface is None
    assert view.mesh is EMPTY_MESH
