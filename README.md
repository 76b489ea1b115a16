# orrery

A small orrery: the Sun and its planets laid out around the Sun, seen from a
camera that slowly circles the scene. Sizes and distances are real figures put
on a logarithmic scale, so that bodies of very different sizes and orbits all
fit on screen at once.

## Install

```
pip install .
```

This installs `pygame`, which draws the window. For the tests:

```
pip install .[test]
pytest
```

## Run

```
orrery
```

This opens a 1600×1000 window titled "Solar System". Close the window or press
Escape to quit. Options:

- `--width`, `--height` – window size in pixels (default 1600 and 1000).
- `--textures DIR` – directory holding the images `Stars.jpg` (background) and
  one image per body, such as `Earth.jpg` (default `../assets/textures`).
  Any image that cannot be loaded is skipped; a body without one is drawn as a
  disc of a flat colour.
- `--frames N` – stop after `N` frames.

Each body is drawn as a disc whose size depends on its scaled radius and its
distance from the camera; farther bodies are painted first. A textured body's
image is turned by its axis angle and cropped to a circle.

## Use as a library

The planetary data and the scaling can be used without a window:

```python
from orrery.solar_system import get_solar_system
from orrery.celestial import ScaleBounds

bodies = get_solar_system()
bounds = ScaleBounds.from_bodies(bodies)

for body in bodies:
    print(body.name, body.scaled_radius(bounds), body.scaled_orbit_radius(bounds))

sun, earth = bodies[0], bodies[4]
print(earth.distance_to(sun))          # difference of mean orbit radii, km
print(earth.attraction_force(sun))     # Newtonian attraction
```

### `orrery.celestial`

`CelestialBody` is a frozen dataclass holding name, image file name, mass
(kg), volume (km³), density (kg/m³), surface gravity (m/s²), mean radius (km),
mean orbital velocity (km/s), perihelion and aphelion (km), orbital period
(days), rotation period, number of satellites, and whether it has rings. Its
`orbit_radius` is the mean of perihelion and aphelion. `distance_to` gives the
absolute difference of two orbit radii, and `attraction_force` the
gravitational attraction over that distance; at a distance of zero it is
infinite.

`ScaleBounds.from_bodies` needs at least two bodies (it raises `ValueError`
otherwise). It finds the smallest and largest radius and orbit radius; for the
smallest orbit radius it ignores bodies whose orbit radius is zero. Radii are
mapped onto 1–1000, and orbit radii onto a range that starts at 1001 and ends
at `2000 × ln(greatest orbit radius / greatest radius)`. `scale_radius` and
`scale_orbit_radius` do the mapping. `log_scale` is the plain function behind
it; it maps zero to zero and raises `ValueError` for an empty range.

### `orrery.solar_system`

`get_solar_system()` returns a new list of the bodies, the Sun first, Pluto
last.

### `orrery.scene`

`Scene(bodies, *, bounds=None, time_scale=1.0, focal_scale=1.0)` places every
body on its scaled orbit. The camera starts at `(focal_size, focal_size,
focal_size)`, where `focal_size` is the last body's scaled orbit radius times
`focal_scale`. `update(frame_time)` adds to `elapsed`, turns the camera about
its up axis at 0.5 radians per second, and sets each body's orbit angle to
`orbit / 360 × time_scale` and axis angle to `rotation / 360 × time_scale`
degrees. `placements()` returns a `BodyPlacement` (body, position, radius,
orbit angle, axis angle) for each body.

`Camera` has a position, target, up vector, vertical field of view (45°) and
near and far planes (1 and 100000). `orbit(frame_time)` circles the target;
`project(point, width, height)` returns `(x, y, depth)` in pixels, or `None`
for a point outside the near and far planes.

### `orrery.view`

`Window(bodies, *, size=(1600, 1000), texture_dir=None, fps=60)` opens the
pygame display and can be used as a context manager. `is_open()`, `update()`
(one frame) and `close()` run it. `body_colour(name)` gives the flat colour
used for a body without a texture. `main(argv=None)` is the `orrery` command.

## What it does not do

The bodies do not move along their orbits over time: their angles come from
their orbital and rotation periods but stay the same from frame to frame; only
the camera moves. No images are included with the package, so without a
texture directory everything is drawn in flat colours on black.