"""Keyboard control of a camera and a frames-per-second counter."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

import numpy as np


class Key(IntEnum):
    """Keys that steer the camera, numbered as the windowing layer reports them."""

    SPACE = 32
    SLASH = 47  # minus on a Portuguese layout
    A = 65
    D = 68
    S = 83
    U = 85
    W = 87
    LEFT_BRACKET = 91  # plus on a Portuguese layout
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    LEFT_SHIFT = 340


class KeyAction(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class _Steerable(Protocol):
    def move(self, v: np.ndarray) -> None: ...

    def pan(self, v: np.ndarray) -> None: ...

    def zoom(self, factor: float) -> None: ...


# Per-second effect of each held key: (move, pan, zoom).
_EFFECTS: dict[int, tuple[tuple[float, float, float], tuple[float, float], float]] = {
    Key.UP: ((0.0, 0.0, 0.0), (0.0, 1.0), 0.0),
    Key.DOWN: ((0.0, 0.0, 0.0), (0.0, -1.0), 0.0),
    Key.LEFT: ((0.0, 0.0, 0.0), (-1.0, 0.0), 0.0),
    Key.RIGHT: ((0.0, 0.0, 0.0), (1.0, 0.0), 0.0),
    Key.LEFT_BRACKET: ((0.0, 0.0, 0.0), (0.0, 0.0), 1.0),
    Key.SLASH: ((0.0, 0.0, 0.0), (0.0, 0.0), -1.0),
    Key.W: ((0.0, 0.0, 1.0), (0.0, 0.0), 0.0),
    Key.S: ((0.0, 0.0, -1.0), (0.0, 0.0), 0.0),
    Key.A: ((-1.0, 0.0, 0.0), (0.0, 0.0), 0.0),
    Key.D: ((1.0, 0.0, 0.0), (0.0, 0.0), 0.0),
    Key.SPACE: ((0.0, 1.0, 0.0), (0.0, 0.0), 0.0),
    Key.LEFT_SHIFT: ((0.0, -1.0, 0.0), (0.0, 0.0), 0.0),
}


class CameraController:
    """Turns held keys into camera motion proportional to how long they are held."""

    def __init__(self, camera: _Steerable) -> None:
        self.camera = camera
        self.pressed_keys: dict[int, float] = {}

    def on_update(self, time: float) -> None:
        """Apply the motion of every held key since it was last accounted for."""
        move = np.zeros(3)
        pan = np.zeros(2)
        zoom = 0.0

        for key, press_time in self.pressed_keys.items():
            delta = time - press_time
            effect = _EFFECTS.get(key)
            if effect is not None:
                key_move, key_pan, key_zoom = effect
                move += np.asarray(key_move) * delta
                pan += np.asarray(key_pan) * delta
                zoom += key_zoom * delta
            self.pressed_keys[key] = time

        self.camera.move(move)
        self.camera.pan(pan)
        self.camera.zoom(zoom)

    def on_key_event(self, key: int, action: int, time: float) -> None:
        """Record a key press, or settle and forget a released key."""
        if action == KeyAction.PRESS:
            self.pressed_keys[int(key)] = time
        elif action == KeyAction.RELEASE:
            self.on_update(time)
            self.pressed_keys.pop(int(key), None)


class FPSCounter:
    """Counts frames and reports how many were drawn in the last full second."""

    def __init__(self, time: float = 0.0) -> None:
        self.last_second = time
        self.fps = 0
        self.frame_count = 0

    def count_frame(self, time: float) -> int:
        """Count one frame drawn at *time* and return the current rate."""
        self.frame_count += 1
        if time - self.last_second >= 1.0:
            self.last_second = time
            self.fps = self.frame_count
            self.frame_count = 0
        return self.fps