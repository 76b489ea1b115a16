"""Scene state for the orrery: the camera and the placement of every body."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from orrery.celestial import CelestialBody, ScaleBounds

Vector = tuple[float, float, float]

ORBITAL_SPEED = 0.5
"""Angular speed of the orbiting camera, radians per second."""

DEFAULT_FOVY = 45.0
NEAR_PLANE = 1.0
FAR_PLANE = 100000.0


def _add(a: Vector, b: Vector) -> Vector:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vector, b: Vector) -> Vector:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vector, factor: float) -> Vector:
    return (a[0] * factor, a[1] * factor, a[2] * factor)


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a: Vector) -> Vector:
    length = math.sqrt(_dot(a, a))
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return _scale(a, 1 / length)


def _rotate(vector: Vector, axis: Vector, angle: float) -> Vector:
    """Rotate ``vector`` about the unit ``axis`` by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return _add(
        _add(_scale(vector, cos_a), _scale(_cross(axis, vector), sin_a)),
        _scale(axis, _dot(axis, vector) * (1 - cos_a)),
    )


@dataclass
class Camera:
    """A perspective camera looking at ``target`` from ``position``."""

    position: Vector
    target: Vector = (0.0, 0.0, 0.0)
    up: Vector = (0.0, 1.0, 0.0)
    fovy: float = DEFAULT_FOVY
    near: float = NEAR_PLANE
    far: float = FAR_PLANE

    def orbit(self, frame_time: float) -> None:
        """Circle the target about the up axis for ``frame_time`` seconds."""
        axis = _normalize(self.up)
        view = _sub(self.position, self.target)
        rotated = _rotate(view, axis, ORBITAL_SPEED * frame_time)
        self.position = _add(self.target, rotated)

    def project(
        self, point: Vector, width: float, height: float
    ) -> Optional[tuple[float, float, float]]:
        """Project a world point to screen coordinates.

        Returns ``(x, y, depth)`` in pixels and world units, or ``None`` when
        the point lies outside the near and far planes.
        """
        forward = _normalize(_sub(self.target, self.position))
        right = _normalize(_cross(forward, self.up))
        true_up = _cross(right, forward)

        relative = _sub(point, self.position)
        depth = _dot(relative, forward)
        if depth < self.near or depth > self.far:
            return None

        focal = 1 / math.tan(math.radians(self.fovy) / 2)
        aspect = width / height
        ndc_x = _dot(relative, right) * focal / aspect / depth
        ndc_y = _dot(relative, true_up) * focal / depth
        return ((ndc_x + 1) * width / 2, (1 - ndc_y) * height / 2, depth)


@dataclass(frozen=True)
class BodyPlacement:
    """Where and how large a body is drawn, in scene units and degrees."""

    body: CelestialBody
    position: Vector
    radius: float
    orbit_angle: float
    axis_angle: float


class Scene:
    """Bodies laid out on their scaled orbits with an orbiting camera."""

    def __init__(
        self,
        bodies: Iterable[CelestialBody],
        *,
        bounds: Optional[ScaleBounds] = None,
        time_scale: float = 1.0,
        focal_scale: float = 1.0,
    ) -> None:
        self.bodies = tuple(bodies)
        if not self.bodies:
            raise ValueError("a scene needs at least one body")
        self.bounds = bounds if bounds is not None else ScaleBounds.from_bodies(self.bodies)
        self.time_scale = time_scale
        self.focal_scale = focal_scale
        self.elapsed = 0.0
        self._orbit_angles = [0.0] * len(self.bodies)
        self._axis_angles = [0.0] * len(self.bodies)
        size = self.focal_size
        self.camera = Camera(position=(size, size, size))

    @property
    def focal_size(self) -> float:
        """Camera distance along each axis: the outermost body's scaled orbit."""
        return self.bodies[-1].scaled_orbit_radius(self.bounds) * self.focal_scale

    def update(self, frame_time: float) -> None:
        """Advance the scene by ``frame_time`` seconds."""
        self.elapsed += frame_time
        self.camera.orbit(frame_time)
        self._orbit_angles = [
            body.orbit / 360.0 * self.time_scale for body in self.bodies
        ]
        self._axis_angles = [
            body.rotation / 360.0 * self.time_scale for body in self.bodies
        ]

    def placements(self) -> list[BodyPlacement]:
        """Position and drawn size of every body, in the scene's order."""
        result = []
        for body, orbit_angle, axis_angle in zip(
            self.bodies, self._orbit_angles, self._axis_angles
        ):
            distance = body.scaled_orbit_radius(self.bounds)
            theta = math.radians(orbit_angle)
            position = (distance * math.cos(theta), 0.0, -distance * math.sin(theta))
            result.append(
                BodyPlacement(
                    body=body,
                    position=position,
                    radius=body.scaled_radius(self.bounds),
                    orbit_angle=orbit_angle,
                    axis_angle=axis_angle,
                )
            )
        return result