"""Toolkit-independent state of an interactive surface view.

``SurfaceView`` owns the displayed grid, the mesh built from it and the
rotation controller.  Replacing the grid rebuilds the mesh synchronously;
observers are told about the new mesh only once it is complete, so a
half-built mesh is never visible.  The rotation survives grid changes.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from funcsurf.config import TARGET_SPANS, Spans
from funcsurf.grid import SampleGrid
from funcsurf.material import EMBER, SurfaceMaterial
from funcsurf.mesher import EMPTY_MESH, Mesh, build_mesh
from funcsurf.presets import FunctionSurface
from funcsurf.rotation import RotationController

logger = logging.getLogger(__name__)

MeshListener = Callable[[Mesh], None]


class SurfaceView:

    def __init__(self,
                 rotation: Optional[RotationController] = None,
                 material: SurfaceMaterial = EMBER,
                 spans: Spans = TARGET_SPANS):
        self.rotation = rotation if rotation is not None else RotationController()
        self.material = material
        self.spans = spans
        self._grid: Optional[SampleGrid] = None
        self._surface: Optional[FunctionSurface] = None
        self._mesh: Mesh = EMPTY_MESH
        self._listeners: List[MeshListener] = []

    @property
    def grid(self) -> Optional[SampleGrid]:
        return self._grid

    @property
    def surface(self) -> Optional[FunctionSurface]:
        return self._surface

    @property
    def mesh(self) -> Mesh:
        return self._mesh

    def subscribe(self, listener: MeshListener) -> Callable[[], None]:
        """Call ``listener`` with every new mesh.  Returns an unsubscribe function."""

        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_grid(self, grid: Optional[SampleGrid]) -> Mesh:
        """Replace the displayed grid and rebuild the mesh.

        ``None`` clears the view.
        """

        mesh = EMPTY_MESH if grid is None else build_mesh(grid, spans=self.spans)
        self._grid = grid
        self._mesh = mesh
        if grid is not None:
            logger.debug("grid %dx%d -> %d triangles", grid.rows, grid.cols, mesh.triangle_count)
        for listener in list(self._listeners):
            listener(mesh)
        return mesh

    def set_surface(self, surface: Optional[FunctionSurface]) -> Mesh:
        """Show a titled surface."""

        self._surface = surface
        if surface is not None:
            logger.info("showing %r", surface.title)
        return self.set_grid(None if surface is None else surface.grid)


__all__ = ["SurfaceView", "MeshListener"]
