"""Cameras: view and projection matrices, frustum culling and motion."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from cgengine.bounding import BoundingSphere
from cgengine.transforms import rotation_matrix

_TWO_PI = 2.0 * math.pi
_HALF_PI = 0.5 * math.pi


def _vec3(value: Sequence[float], name: str) -> np.ndarray:
    array = np.asarray(value, dtype=float).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got {array.shape[0]}")
    return array.copy()


def _normalize(v: np.ndarray, name: str) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError(f"{name} cannot be normalised")
    return v / length


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye, "view direction")
    s = _normalize(np.cross(f, up), "camera right vector")
    u = np.cross(s, f)
    view = np.identity(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -float(np.dot(s, eye))
    view[1, 3] = -float(np.dot(u, eye))
    view[2, 3] = float(np.dot(f, eye))
    return view


def _perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fov / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = -(far + near) / (far - near)
    projection[2, 3] = -(2.0 * far * near) / (far - near)
    projection[3, 2] = -1.0
    return projection


def plane_equation(
    p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]
) -> np.ndarray:
    """Plane (a, b, c, d) through three points, with a unit normal."""
    a, b, c = _vec3(p1, "p1"), _vec3(p2, "p2"), _vec3(p3, "p3")
    normal = _normalize(np.cross(b - a, c - a), "plane normal")
    return np.append(normal, -float(np.dot(normal, a)))


class Camera:
    """A perspective camera that stays where it is put."""

    def __init__(
        self,
        position: Sequence[float],
        look_at: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
        fov: float = math.radians(60.0),
        near: float = 1.0,
        far: float = 1000.0,
    ) -> None:
        self.position = _vec3(position, "position")
        self.look_at = _vec3(look_at, "look_at")
        self.up = _vec3(up, "up")
        self.fov = float(fov)
        self.near = float(near)
        self.far = float(far)
        self.aspect_ratio = 1.0
        self.time = 0.0
        self.camera_matrix = np.identity(4)
        self.view_frustum = np.zeros((6, 4))
        Camera._update_with_motion(self)

    def set_position(self, position: Sequence[float]) -> None:
        """Place the camera at *position*."""
        self.position = _vec3(position, "position")
        self._update_with_motion()

    def set_window_size(self, width: int, height: int) -> None:
        """Adapt the aspect ratio to a window of the given size."""
        if height == 0:
            raise ValueError("window height must not be zero")
        self.aspect_ratio = width / height
        self._update_with_motion()

    def move(self, v: Sequence[float]) -> None:
        """Translate the camera; a fixed camera ignores this."""

    def pan(self, v: Sequence[float]) -> None:
        """Rotate the camera; a fixed camera ignores this."""

    def zoom(self, factor: float) -> None:
        """Zoom the camera; a fixed camera ignores this."""

    def update_with_time(self, time: float) -> None:
        """Record the current animation time; a fixed camera does not move."""
        self.time = float(time)

    def is_in_frustum(self, sphere: BoundingSphere) -> bool:
        """Whether any part of *sphere* may lie inside the view frustum."""
        center = np.asarray(sphere.center[:3], dtype=float)
        return not any(
            float(np.dot(plane[:3], center)) + plane[3] < -sphere.radius
            for plane in self.view_frustum
        )

    def _update_with_motion(self) -> None:
        view = _look_at(self.position, self.look_at, self.up)
        projection = _perspective(self.fov, self.aspect_ratio, self.near, self.far)
        self.camera_matrix = projection @ view

        tan_half = math.tan(self.fov / 2.0)
        half_near_height = tan_half * self.near
        half_near_width = half_near_height * self.aspect_ratio
        half_far_height = tan_half * self.far
        half_far_width = half_far_height * self.aspect_ratio

        d = _normalize(self.look_at - self.position, "view direction")
        right = _normalize(np.cross(d, self.up), "camera right vector")
        real_up = _normalize(np.cross(right, d), "camera up vector")

        far_center = self.position + d * self.far
        near_center = self.position + d * self.near

        ntl = near_center + real_up * half_near_height - right * half_near_width
        ntr = near_center + real_up * half_near_height + right * half_near_width
        nbl = near_center - real_up * half_near_height - right * half_near_width
        nbr = near_center - real_up * half_near_height + right * half_near_width

        ftl = far_center + real_up * half_far_height - right * half_far_width
        ftr = far_center + real_up * half_far_height + right * half_far_width
        fbl = far_center - real_up * half_far_height - right * half_far_width
        fbr = far_center - real_up * half_far_height + right * half_far_width

        self.view_frustum = np.stack(
            [
                plane_equation(ntl, ntr, nbl),
                plane_equation(ftl, fbl, ftr),
                plane_equation(ntl, nbl, ftl),
                plane_equation(ntr, ftr, nbr),
                plane_equation(ntl, ftl, ntr),
                plane_equation(fbr, fbl, nbl),
            ]
        )


class OrbitalCamera(Camera):
    """A camera orbiting its look-at point on a sphere."""

    def __init__(
        self,
        position: Sequence[float],
        look_at: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
        fov: float = math.radians(60.0),
        near: float = 1.0,
        far: float = 1000.0,
    ) -> None:
        self.radius = 0.0
        self.azimuth = 0.0
        self.polar = 0.0
        super().__init__(position, look_at, up, fov, near, far)
        self.set_position(self.position)

    def set_position(self, position: Sequence[float]) -> None:
        """Place the camera, deriving its spherical coordinates."""
        pos = _vec3(position, "position")
        offset = pos - self.look_at
        self.radius = float(np.linalg.norm(offset))
        if self.radius > 0.0:
            d = offset / self.radius
            self.azimuth = math.atan2(d[2], d[0])
            self.polar = math.acos(max(-1.0, min(1.0, float(d[1]))))
        else:
            self.azimuth = 0.0
            self.polar = 0.0
        super().set_position(pos)

    def pan(self, v: Sequence[float]) -> None:
        """Orbit around the look-at point."""
        dx, dy = (float(c) * 2.5 for c in v)
        self.azimuth -= dx
        self.polar -= dy
        self._update_with_motion()

    def zoom(self, factor: float) -> None:
        """Move towards (positive) or away from (negative) the look-at point."""
        divisor = 1.0 + float(factor) * 0.8
        if divisor == 0.0:
            raise ValueError("zoom factor would collapse the orbit")
        self.radius /= divisor
        self._update_with_motion()

    def _update_with_motion(self) -> None:
        self.azimuth = self.azimuth % _TWO_PI
        self.polar = min(max(self.polar, 0.01), math.pi - 0.01)
        self.position = self.look_at + self.radius * np.array(
            [
                math.sin(self.polar) * math.cos(self.azimuth),
                math.cos(self.polar),
                math.sin(self.polar) * math.sin(self.azimuth),
            ]
        )
        super()._update_with_motion()


class FreeCamera(Camera):
    """A first-person camera steered by yaw and pitch."""

    def __init__(
        self,
        position: Sequence[float],
        look_at: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
        fov: float = math.radians(60.0),
        near: float = 1.0,
        far: float = 1000.0,
    ) -> None:
        self.yaw = 0.0
        self.pitch = 0.0
        super().__init__(position, look_at, up, fov, near, far)
        self.set_position(self.position)

    def set_position(self, position: Sequence[float]) -> None:
        """Place the camera, keeping it aimed at its current look-at point."""
        pos = _vec3(position, "position")
        d = _normalize(self.look_at - pos, "view direction")
        self.yaw = math.atan2(d[2], d[0])
        self.pitch = math.asin(max(-1.0, min(1.0, float(d[1]))))
        super().set_position(pos)

    def move(self, v: Sequence[float]) -> None:
        """Move right, up and forward by the components of *v*."""
        motion = _vec3(v, "motion") * 100.0
        d = _normalize(self.look_at - self.position, "view direction")
        right = _normalize(np.cross(d, self.up), "camera right vector")
        self.position = self.position + right * motion[0] + self.up * motion[1] + d * motion[2]
        self._update_with_motion()

    def pan(self, v: Sequence[float]) -> None:
        """Turn by yaw and pitch deltas."""
        dx, dy = (float(c) * 1.5 for c in v)
        self.yaw += dx
        self.pitch += dy
        self._update_with_motion()

    def _update_with_motion(self) -> None:
        self.yaw = self.yaw % _TWO_PI
        self.pitch = min(max(self.pitch, -_HALF_PI + 0.01), _HALF_PI - 0.01)
        d = np.array(
            [
                math.cos(self.pitch) * math.cos(self.yaw),
                math.sin(self.pitch),
                math.cos(self.pitch) * math.sin(self.yaw),
            ]
        )
        self.look_at = self.position + d
        super()._update_with_motion()


class ThirdPersonCamera(OrbitalCamera):
    """An orbital camera following a player that walks with the look-at point."""

    def __init__(
        self,
        position: Sequence[float],
        look_at: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
        fov: float = math.radians(60.0),
        near: float = 1.0,
        far: float = 1000.0,
        player: Any = None,
    ) -> None:
        self.player = player
        self.player_transform = np.identity(4)
        super().__init__(position, look_at, up, fov, near, far)

    def move(self, v: Sequence[float]) -> None:
        """Walk the player; moving forward is twice as fast as other directions."""
        motion = _vec3(v, "motion")
        d = self.look_at - self.position
        front = _normalize(np.array([d[0], 0.0, d[2]]), "walking direction")
        right = _normalize(np.cross(front, self.up), "walking right vector")
        speed = np.array([1.0, 1.0, 2.0 if motion[2] > 0 else 1.0])
        scaled = motion * speed
        self.look_at = self.look_at + right * scaled[0] + self.up * scaled[1] + front * scaled[2]
        self._update_with_motion()

    def update_with_time(self, time: float) -> None:
        """Advance the player's animations within its current placement."""
        super().update_with_time(time)
        if self.player is not None:
            self.player.update(self.player_transform, time)

    def _update_with_motion(self) -> None:
        super()._update_with_motion()
        d = self.look_at - self.position
        angle = math.atan2(d[0], d[2])
        translation = np.identity(4)
        translation[:3, 3] = self.look_at
        self.player_transform = translation @ rotation_matrix(angle, self.up)


def create_camera(
    kind: str,
    position: Sequence[float],
    look_at: Sequence[float],
    up: Sequence[float] = (0.0, 1.0, 0.0),
    fov: float = 60.0,
    near: float = 1.0,
    far: float = 1000.0,
) -> Camera:
    """Build a camera by type name; *fov* is given in degrees."""
    cameras = {
        "orbital": OrbitalCamera,
        "free": FreeCamera,
        "thirdperson": ThirdPersonCamera,
    }
    try:
        cls = cameras[kind]
    except KeyError:
        raise ValueError(f"Invalid camera type: {kind!r}") from None
    return cls(position, look_at, up, math.radians(fov), near, far)