"""Interactive pyglet window for function surfaces."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pyglet
from pyglet import gl
from pyglet.graphics.shader import Shader, ShaderProgram
from pyglet.math import Mat4
from pyglet.window import key, mouse

from funcsurf.config import ViewerSettings
from funcsurf.material import SurfaceMaterial
from funcsurf.mesher import Mesh, vertex_normals
from funcsurf.presets import FunctionSurface
from funcsurf.rotation import PointerButton, RotationController
from funcsurf.view import SurfaceView
from funcsurf.xform import Translation

logger = logging.getLogger(__name__)

HELP_TEXT = "right-drag: rotate    tab / 1-9: switch surface    return: reset view    esc: quit"

_BUTTONS = {
    mouse.LEFT: PointerButton.PRIMARY,
    mouse.RIGHT: PointerButton.SECONDARY,
    mouse.MIDDLE: PointerButton.MIDDLE,
}

vertex_source = """#version 330 core
in vec3 position;
in vec3 normals;
in vec2 tex_coords;

uniform mat4 projection;
uniform mat4 view;
uniform mat4 model;

out vec3 eye_position;
out vec3 eye_normal;
out vec2 uv;

void main()
{
    mat4 modelview = view * model;
    vec4 eye = modelview * vec4(position, 1.0);
    eye_position = eye.xyz;
    eye_normal = mat3(modelview) * normals;
    uv = tex_coords;
    gl_Position = projection * eye;
}
"""

fragment_template = """#version 330 core
in vec3 eye_position;
in vec3 eye_normal;
in vec2 uv;

out vec4 final_color;

const vec3 light_direction = vec3(0.3, 0.6, 1.0);
const float ambient = 0.35;
const vec4 specular_color = vec4({specular});
const float specular_power = {power};

{ramp}

void main()
{{
    vec3 n = normalize(eye_normal);
    // both faces are lit
    if (!gl_FrontFacing) n = -n;
    vec3 l = normalize(light_direction);
    vec3 h = normalize(l + normalize(-eye_position));
    float diffuse = max(dot(n, l), 0.0);
    float highlight = diffuse > 0.0 ? pow(max(dot(n, h), 0.0), specular_power) : 0.0;
    vec3 base = ramp(1.0 - uv.y);
    vec3 color = base * (ambient + (1.0 - ambient) * diffuse)
               + specular_color.rgb * specular_color.a * highlight;
    final_color = vec4(color, 1.0);
}}
"""


def _vec(values: Sequence[float]) -> str:
    return ", ".join(f"{v:.6f}" for v in values)


def ramp_glsl(material: SurfaceMaterial) -> str:
    """GLSL ``vec3 ramp(float t)`` reproducing ``material.color_at``."""

    stops = material.stops
    lines = ["vec3 ramp(float t)", "{",
             f"    if (t <= {stops[0].offset:.6f}) return vec3({_vec(stops[0].color[:3])});"]
    for lo, hi in zip(stops, stops[1:]):
        span = hi.offset - lo.offset
        if span <= 0.0:
            continue
        lines.append(
            f"    if (t <= {hi.offset:.6f}) return mix(vec3({_vec(lo.color[:3])}), "
            f"vec3({_vec(hi.color[:3])}), (t - {lo.offset:.6f}) / {span:.6f});")
    lines.append(f"    return vec3({_vec(stops[-1].color[:3])});")
    lines.append("}")
    return "\n".join(lines)


def fragment_source(material: SurfaceMaterial) -> str:
    return fragment_template.format(specular=_vec(material.specular_color),
                                    power=f"{material.specular_power:.6f}",
                                    ramp=ramp_glsl(material))


class SurfaceGroup(pyglet.graphics.Group):
    """Binds the surface program and the camera and model matrices."""

    def __init__(self, program: ShaderProgram, window: "SurfaceWindow", order: int = 0):
        super().__init__(order=order)
        self.program = program
        self.window = window

    def set_state(self):
        self.program.use()
        self.program['projection'] = self.window.surface_projection
        self.program['view'] = self.window.view_matrix.column_major()
        self.program['model'] = self.window.surface_view.rotation.transform().column_major()
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_CULL_FACE)

    def unset_state(self):
        gl.glDisable(gl.GL_DEPTH_TEST)
        self.program.stop()


class SurfaceWindow(pyglet.window.Window):
    """Window showing one surface at a time, rotated by right-dragging."""

    def __init__(self, surface_view: SurfaceView, surfaces: Sequence[FunctionSurface],
                 settings: ViewerSettings, **kwargs):
        super().__init__(width=settings.width, height=settings.height,
                         caption=settings.caption, resizable=True, visible=False, **kwargs)
        self.surface_view = surface_view
        self.surfaces: List[FunctionSurface] = list(surfaces)
        self.settings = settings
        self.view_matrix = Translation((0.0, 0.0, -settings.camera_distance))
        self.surface_projection = Mat4()

        self.program = ShaderProgram(Shader(vertex_source, 'vertex'),
                                     Shader(fragment_source(surface_view.material), 'fragment'))
        self.batch = pyglet.graphics.Batch()
        self.group = SurfaceGroup(self.program, self)
        self._vertex_list = None

        self.hud = pyglet.graphics.Batch()
        self.title_label = pyglet.text.Label("", x=16, y=self.height - 16, font_size=16,
                                             anchor_x='left', anchor_y='top',
                                             color=(240, 240, 255, 255), batch=self.hud)
        self.description_label = pyglet.text.Label("", x=16, y=self.height - 44, font_size=11,
                                                   anchor_x='left', anchor_y='top',
                                                   color=(200, 200, 210, 255), batch=self.hud)
        self.help_label = pyglet.text.Label(HELP_TEXT, x=16, y=16, font_size=10,
                                            anchor_x='left', anchor_y='bottom',
                                            color=(160, 160, 175, 255), batch=self.hud)

        rotation = surface_view.rotation
        rotation.on_capture = self._claim_pointer
        rotation.on_release = self._release_pointer
        self._unsubscribe = surface_view.subscribe(self._upload)
        self._upload(surface_view.mesh)

        gl.glClearColor(*settings.background, 1.0)
        self.set_visible(True)

    ## mesh upload

    def _upload(self, mesh: Mesh) -> None:
        if self._vertex_list is not None:
            self._vertex_list.delete()
            self._vertex_list = None
        if mesh.is_empty:
            return
        positions, tex_coords, indices = mesh.as_arrays()
        normals = [c for n in vertex_normals(mesh) for c in n]
        self._vertex_list = self.program.vertex_list_indexed(
            mesh.vertex_count, gl.GL_TRIANGLES, indices.tolist(),
            batch=self.batch, group=self.group,
            position=('f', positions.ravel().tolist()),
            normals=('f', normals),
            tex_coords=('f', tex_coords.ravel().tolist()))

    ## surface selection

    def show(self, index: int) -> None:
        if not self.surfaces:
            return
        surface = self.surfaces[index % len(self.surfaces)]
        self.surface_view.set_surface(surface)
        self.title_label.text = surface.title
        self.description_label.text = surface.description

    def _current_index(self) -> int:
        current = self.surface_view.surface
        for i, surface in enumerate(self.surfaces):
            if surface is current:
                return i
        return -1

    ## pointer capture feedback

    def _claim_pointer(self) -> None:
        self.set_mouse_cursor(self.get_system_mouse_cursor(self.CURSOR_SIZE))

    def _release_pointer(self) -> None:
        self.set_mouse_cursor(None)

    def _local(self, x: int, y: int):
        # pyglet counts y upward from the bottom edge
        return (x, self.height - y)

    ## event handlers

    def on_resize(self, width, height):
        super().on_resize(width, height)
        aspect = max(width / max(height, 1), 0.1)
        self.surface_projection = Mat4.perspective_projection(
            aspect, 0.1, 100.0, fov=self.settings.field_of_view)
        self.title_label.y = height - 16
        self.description_label.y = height - 44

    def on_draw(self):
        self.clear()
        self.batch.draw()
        self.hud.draw()

    def on_mouse_press(self, x, y, button, modifiers):
        if button in _BUTTONS:
            self.surface_view.rotation.press(self._local(x, y), _BUTTONS[button])

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.surface_view.rotation.move(self._local(x, y), bool(buttons & mouse.RIGHT))

    def on_mouse_release(self, x, y, button, modifiers):
        if button in _BUTTONS:
            self.surface_view.rotation.release(_BUTTONS[button])

    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.TAB:
            self.show(self._current_index() + 1)
        elif key._1 <= symbol <= key._9:
            idx = symbol - key._1
            if idx < len(self.surfaces):
                self.show(idx)
        elif symbol == key.RETURN:
            self.surface_view.rotation.reset()

    def on_close(self):
        self._unsubscribe()
        if self._vertex_list is not None:
            self._vertex_list.delete()
            self._vertex_list = None
        super().on_close()


def open_window(surface_view: SurfaceView, surfaces: Sequence[FunctionSurface],
                settings: ViewerSettings) -> SurfaceWindow:
    """Create the viewer window, with multisampling if the hardware has it."""

    try:
        config = gl.Config(sample_buffers=1, samples=4, depth_size=24, double_buffer=True)
        return SurfaceWindow(surface_view, surfaces, settings, config=config)
    except pyglet.window.NoSuchConfigException:
        logger.info("multisampling unavailable, falling back to a plain config")
        config = gl.Config(depth_size=24, double_buffer=True)
        return SurfaceWindow(surface_view, surfaces, settings, config=config)


def run_viewer(settings: ViewerSettings, surfaces: Sequence[FunctionSurface],
               initial: Optional[FunctionSurface] = None) -> None:
    """Open the viewer and run the pyglet event loop until it closes."""

    rotation = RotationController(sensitivity=settings.rotation_sensitivity,
                                  yaw=settings.initial_yaw,
                                  pitch=settings.initial_pitch)
    surface_view = SurfaceView(rotation=rotation, spans=settings.spans)
    window = open_window(surface_view, surfaces, settings)
    surfaces = window.surfaces
    start = surfaces.index(initial) if initial in surfaces else 0
    window.show(start)
    pyglet.app.run()


__all__ = [
    "SurfaceGroup",
    "SurfaceWindow",
    "open_window",
    "run_viewer",
    "ramp_glsl",
    "fragment_source",
]
