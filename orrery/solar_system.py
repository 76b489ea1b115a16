"""Planetary data for the bodies of the solar system."""

from __future__ import annotations

from orrery.celestial import CelestialBody

# Units: mass kg, volume km^3, density kg/m^3, gravity m/s^2, radius km
# (volumetric mean), velocity km/s (mean orbital), perihelion and aphelion km,
# orbit days.
_DATA = (
    ("Sun", "Sun.jpg", 1.989e30, 1.412e18, 1408, 274, 6.957e5,
     0, 0, 0, 0, 0, 0, False),
    ("WorldMachine", "WorldMachine.png", 0.3301e24, 6.083e10, 5.429e3, 3.70, 2.4397e3,
     4.736e1, 4.6000e7, 6.9818e7, 8.7969e1, 4222.6, 0, False),
    ("Mercury", "Mercury.jpg", 0.3301e24, 6.083e10, 5.429e3, 3.70, 6.9911e4,
     4.736e1, 7.40595e8, 8.16363e8, 8.7969e1, 4222.6, 0, False),
    ("Venus", "Venus.jpg", 4.8673e24, 9.2843e11, 5.243e3, 8.87, 6.0518e3,
     3.502e1, 1.07480e8, 1.08941e8, 2.24701e2, 2802, 0, False),
    ("Earth", "Earth.jpg", 5.9722e24, 1.08321e12, 5.513e3, 9.82, 6.371e3,
     2.978e1, 1.47095e8, 1.52100e8, 3.65256e2, 24, 1, False),
    ("Mars", "Mars.jpg", 6.4159e23, 1.6312e11, 3.934e3, 3.73, 3.3895e3,
     2.408e1, 2.06650e8, 2.49261e8, 6.86980e2, 24.6597, 2, False),
    ("Jupiter", "Jupiter.jpg", 1.89813e27, 1.43128e15, 1.326e3, 2.592e1, 6.9911e4,
     1.306e1, 7.40595e8, 8.16363e8, 4.33259e3, 9.9259, 95, True),
    ("Saturn", "Saturn.jpg", 5.6832e26, 8.2713e14, 687, 11.19, 5.8232e4,
     9.67, 1.357554e9, 1.506527e9, 1.075699e4, 10.656, 146, True),
    ("Uranus", "Uranus.jpg", 8.6811e24, 6.833e13, 1.270e3, 9.01, 2.5362e4,
     6.79, 2.732696e9, 3.00139e9, 3.06854e4, 17.24, 28, True),
    ("Neptune", "Neptune.jpg", 1.02409e26, 6.254e13, 1.638e3, 1.127e1, 2.4622e4,
     5.45, 4.471050e9, 4.558857e9, 6.0189018e4, 16.11, 16, True),
    ("Pluto", "Pluto.jpg", 1.303e22, 7.02e9, 1.854e3, 6.2e-1, 1.188e3,
     4.64, 4.434987e9, 7.304326e9, 9.05609e5, 153.2820, 5, False),
)


def get_solar_system() -> list[CelestialBody]:
    """Return the bodies of the solar system, the Sun first."""
    return [
        CelestialBody(
            name=name,
            file_name=file_name,
            mass=float(mass),
            volume=float(volume),
            density=float(density),
            gravity=float(gravity),
            radius=float(radius),
            velocity=float(velocity),
            perihelion=float(perihelion),
            aphelion=float(aphelion),
            orbit=float(orbit),
            rotation=float(rotation),
            satellites=satellites,
            ring=ring,
        )
        for (name, file_name, mass, volume, density, gravity, radius, velocity,
             perihelion, aphelion, orbit, rotation, satellites, ring) in _DATA
    ]