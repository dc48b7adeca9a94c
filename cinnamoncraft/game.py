"""Game state: the camera, its movement and the test scene."""

from __future__ import annotations

import math
from enum import Enum, auto

from .meshing import Chunk
from .rng import XorShiftRng
from .transforms import Transform

TITLE = "CinnamonCraft"
MOVE_STEP = 0.1
BACKOFF_STEP = 0.01
BACKOFF_TRIES = 10
COLLISION_PADDING = 0.2
MOUSE_SENSITIVITY = 0.01
MODEL_SPIN = 0.01
CHUNK_EXTENT = 16


class Key(Enum):
    """Controls the game responds to."""

    LEFT = auto()
    RIGHT = auto()
    FORWARD = auto()
    BACKWARD = auto()
    UP = auto()
    DOWN = auto()
    TOGGLE_MOUSE = auto()


_MOVEMENT_KEYS = frozenset(
    {Key.LEFT, Key.RIGHT, Key.FORWARD, Key.BACKWARD, Key.UP, Key.DOWN}
)


class Game:
    """The camera, held controls and scene objects of a running game."""

    def __init__(self) -> None:
        self.camera = Transform(z=2.0)
        self.model_transform = Transform()
        self.chunk = Chunk.filled_random(XorShiftRng())
        self.mouse_captured = True
        self.held: set[Key] = set()

    def is_colliding(self) -> bool:
        """Whether the padded camera lies inside the chunk's volume."""
        cam, pad = self.camera, COLLISION_PADDING
        outside = (
            cam.x + pad < 0
            or cam.y + pad < 0
            or cam.z - pad > 0
            or cam.x - pad > CHUNK_EXTENT
            or cam.y - pad > CHUNK_EXTENT
            or cam.z + pad < -CHUNK_EXTENT
        )
        return not outside

    def _move(self, dx: float, dy: float, dz: float) -> None:
        """Move by the given step, then back off in tenths while colliding."""
        cam = self.camera
        cam.x += dx
        cam.y += dy
        cam.z += dz
        for _ in range(BACKOFF_TRIES):
            if not self.is_colliding():
                break
            cam.x -= dx * BACKOFF_STEP / MOVE_STEP
            cam.y -= dy * BACKOFF_STEP / MOVE_STEP
            cam.z -= dz * BACKOFF_STEP / MOVE_STEP

    def step(self) -> None:
        """Advance one tick: move the camera and spin the test model."""
        sin_yaw = math.sin(self.camera.yaw)
        cos_yaw = math.cos(self.camera.yaw)

        if Key.LEFT in self.held:
            self._move(-cos_yaw * MOVE_STEP, 0.0, -sin_yaw * MOVE_STEP)
        elif Key.RIGHT in self.held:
            self._move(cos_yaw * MOVE_STEP, 0.0, sin_yaw * MOVE_STEP)

        if Key.FORWARD in self.held:
            self._move(sin_yaw * MOVE_STEP, 0.0, -cos_yaw * MOVE_STEP)
        elif Key.BACKWARD in self.held:
            self._move(-sin_yaw * MOVE_STEP, 0.0, cos_yaw * MOVE_STEP)

        if Key.UP in self.held:
            self._move(0.0, MOVE_STEP, 0.0)
        elif Key.DOWN in self.held:
            self._move(0.0, -MOVE_STEP, 0.0)

        self.model_transform.yaw += MODEL_SPIN

    def on_mouse_motion(self, dx: float, dy: float) -> None:
        """Turn the camera; ``dy`` is positive when the mouse moves down."""
        self.camera.pitch += dy * MOUSE_SENSITIVITY
        self.camera.yaw += dx * MOUSE_SENSITIVITY
        limit = math.pi / 2
        self.camera.pitch = max(-limit, min(limit, self.camera.pitch))

    def on_key_press(self, key: Key) -> None:
        """Start holding a movement key, or toggle mouse capture."""
        if key is Key.TOGGLE_MOUSE:
            self.mouse_captured = not self.mouse_captured
        elif key in _MOVEMENT_KEYS:
            self.held.add(key)

    def on_key_release(self, key: Key) -> None:
        """Stop holding a key."""
        self.held.discard(key)