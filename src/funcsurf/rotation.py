"""Drag-to-rotate state machine for the surface view.

The controller has two states.  Pressing the secondary (right) pointer
button starts a drag session; while the button stays held, every pointer
move turns the model by ``sensitivity`` degrees per unit of travel, the
horizontal component about the vertical axis (yaw) and the vertical
component about the horizontal axis (pitch).  Releasing the button ends
the session.

A move that arrives without the button held is ignored and does not end
the session; only an explicit release does.

Positions are in the render surface's local space with y growing
downward, so dragging down tilts the surface towards the viewer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from funcsurf.config import INITIAL_PITCH, INITIAL_YAW, ROTATION_SENSITIVITY
from funcsurf.xform import XAXIS, YAXIS, Matrix, Rotation

Position = Tuple[float, float]


class PointerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class RotationState:
    """Accumulated model rotation in degrees; never wrapped."""

    yaw: float = INITIAL_YAW
    pitch: float = INITIAL_PITCH

    def transform(self) -> Matrix:
        """Yaw about the vertical axis, then pitch about the horizontal axis."""
        return Rotation(XAXIS, self.pitch).mul(Rotation(YAXIS, self.yaw))


@dataclass
class DragSession:
    last_position: Position


class RotationController:
    """Translate secondary-button drags into rotation angles.

    ``on_capture`` and ``on_release`` are called when a drag session claims
    and gives up exclusive use of the pointer.
    """

    def __init__(self,
                 sensitivity: float = ROTATION_SENSITIVITY,
                 yaw: float = INITIAL_YAW,
                 pitch: float = INITIAL_PITCH,
                 on_capture: Optional[Callable[[], None]] = None,
                 on_release: Optional[Callable[[], None]] = None):
        self.sensitivity = sensitivity
        self._initial = (yaw, pitch)
        self.rotation = RotationState(yaw=yaw, pitch=pitch)
        self._session: Optional[DragSession] = None
        self.on_capture = on_capture
        self.on_release = on_release

    def __repr__(self):
        return (f"RotationController(state={self.state.value}, "
                f"yaw={self.yaw}, pitch={self.pitch})")

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self._session is None else DragState.DRAGGING

    @property
    def dragging(self) -> bool:
        return self._session is not None

    @property
    def yaw(self) -> float:
        return self.rotation.yaw

    @property
    def pitch(self) -> float:
        return self.rotation.pitch

    @property
    def last_position(self) -> Optional[Position]:
        return None if self._session is None else self._session.last_position

    def press(self, position: Position, button: PointerButton = PointerButton.SECONDARY) -> bool:
        """Start a drag session at ``position``.  Returns ``True`` if handled."""

        if button is not PointerButton.SECONDARY:
            return False
        self._session = DragSession(last_position=(float(position[0]), float(position[1])))
        if self.on_capture is not None:
            self.on_capture()
        return True

    def move(self, position: Position, secondary_held: bool = True) -> bool:
        """Rotate by the travel since the last position.  Returns ``True`` if handled."""

        if self._session is None or not secondary_held:
            return False
        x, y = float(position[0]), float(position[1])
        last_x, last_y = self._session.last_position
        self.rotation.yaw += (x - last_x) * self.sensitivity
        self.rotation.pitch += (y - last_y) * self.sensitivity
        self._session.last_position = (x, y)
        return True

    def release(self, button: PointerButton = PointerButton.SECONDARY) -> bool:
        """End the drag session.  Returns ``True`` if handled."""

        if button is not PointerButton.SECONDARY:
            return False
        self._session = None
        if self.on_release is not None:
            self.on_release()
        return True

    def reset(self) -> None:
        """Return to the starting orientation; an active drag continues."""
        self.rotation.yaw, self.rotation.pitch = self._initial

    def transform(self) -> Matrix:
        return self.rotation.transform()


__all__ = [
    "PointerButton",
    "DragState",
    "RotationState",
    "DragSession",
    "RotationController",
]
