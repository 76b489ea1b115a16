"""Celestial bodies and the logarithmic scaling used to draw them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

GRAVITATIONAL_CONSTANT = 6.6743e-11
"""Newton's gravitational constant, m^3 kg^-1 s^-2."""

TARGET_MIN_RADIUS = 1.0
TARGET_MAX_RADIUS = 1000.0


def log_scale(
    value: float,
    smallest: float,
    greatest: float,
    target_min: float,
    target_max: float,
) -> float:
    """Map ``value`` logarithmically from [smallest, greatest] onto [target_min, target_max].

    A value of zero always maps to zero.
    """
    if value == 0:
        return 0.0
    log_smallest = math.log(smallest)
    log_greatest = math.log(greatest)
    span = log_greatest - log_smallest
    if span == 0:
        raise ValueError("cannot scale onto an empty range")
    fraction = (math.log(value) - log_smallest) / span
    return target_min + fraction * (target_max - target_min)


@dataclass(frozen=True)
class CelestialBody:
    """A body of the solar system with its physical and orbital data.

    Units: mass kg, volume km^3, density kg/m^3, gravity m/s^2, radius km,
    velocity km/s, perihelion and aphelion km, orbit days.
    """

    name: str
    file_name: str
    mass: float
    volume: float
    density: float
    gravity: float
    radius: float
    velocity: float
    perihelion: float
    aphelion: float
    orbit: float
    rotation: float
    satellites: int
    ring: bool

    @property
    def orbit_radius(self) -> float:
        """Mean distance from the Sun: the average of perihelion and aphelion."""
        return (self.perihelion + self.aphelion) / 2

    def distance_to(self, other: CelestialBody) -> float:
        """Approximate distance to ``other`` as the difference of mean orbit radii."""
        return abs(self.orbit_radius - other.orbit_radius)

    def attraction_force(self, other: CelestialBody) -> float:
        """Gravitational attraction between this body and ``other``.

        Bodies at the same mean distance give an infinite force.
        """
        distance = self.distance_to(other)
        numerator = GRAVITATIONAL_CONSTANT * self.mass * other.mass
        if distance == 0:
            return math.inf if numerator > 0 else math.nan
        return numerator / distance**2

    def scaled_radius(self, bounds: ScaleBounds) -> float:
        """Radius mapped into drawing units."""
        return bounds.scale_radius(self.radius)

    def scaled_orbit_radius(self, bounds: ScaleBounds) -> float:
        """Orbit radius mapped into drawing units."""
        return bounds.scale_orbit_radius(self.orbit_radius)


@dataclass(frozen=True)
class ScaleBounds:
    """Extremes of a set of bodies and the drawing ranges they map onto."""

    smallest_radius: float
    smallest_orbit_radius: float
    greatest_radius: float
    greatest_orbit_radius: float
    target_min_radius: float
    target_max_radius: float
    target_min_orbit_radius: float
    target_max_orbit_radius: float

    @classmethod
    def from_bodies(cls, bodies: Sequence[CelestialBody]) -> ScaleBounds:
        """Compute bounds from a sequence of at least two bodies.

        The smallest orbit radius ignores bodies with no orbit, starting from
        the second body so that a central star at index 0 is skipped.
        """
        if len(bodies) < 2:
            raise ValueError("at least two bodies are needed to compute bounds")

        smallest_radius = min(body.radius for body in bodies)
        greatest_radius = max(body.radius for body in bodies)
        greatest_orbit_radius = max(body.orbit_radius for body in bodies)
        smallest_orbit_radius = min(
            [bodies[1].orbit_radius]
            + [body.orbit_radius for body in bodies if body.orbit_radius != 0]
        )

        target_min_orbit = TARGET_MIN_RADIUS + TARGET_MAX_RADIUS
        target_max_orbit = (
            TARGET_MAX_RADIUS * math.log(greatest_orbit_radius / greatest_radius) * 2
        )
        return cls(
            smallest_radius=smallest_radius,
            smallest_orbit_radius=smallest_orbit_radius,
            greatest_radius=greatest_radius,
            greatest_orbit_radius=greatest_orbit_radius,
            target_min_radius=TARGET_MIN_RADIUS,
            target_max_radius=TARGET_MAX_RADIUS,
            target_min_orbit_radius=target_min_orbit,
            target_max_orbit_radius=target_max_orbit,
        )

    def scale_radius(self, value: float) -> float:
        """Map a body radius into drawing units."""
        return log_scale(
            value,
            self.smallest_radius,
            self.greatest_radius,
            self.target_min_radius,
            self.target_max_radius,
        )

    def scale_orbit_radius(self, value: float) -> float:
        """Map an orbit radius into drawing units."""
        return log_scale(
            value,
            self.smallest_orbit_radius,
            self.greatest_orbit_radius,
            self.target_min_orbit_radius,
            self.target_max_orbit_radius,
        )