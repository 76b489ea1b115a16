"""A pygame window that draws the solar system and its entry point."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pygame

from orrery.celestial import CelestialBody
from orrery.scene import BodyPlacement, Scene
from orrery.solar_system import get_solar_system

TITLE = "Solar System"
DEFAULT_SIZE = (1600, 1000)
TARGET_FPS = 60
DEFAULT_TEXTURE_DIR = "../assets/textures"
BACKGROUND_FILE = "Stars.jpg"
BACKGROUND_COLOUR = (0, 0, 0)
_MAX_DISC_RADIUS = 4096

_COLOURS = {
    "Sun": (253, 184, 19),
    "WorldMachine": (120, 200, 160),
    "Mercury": (169, 169, 169),
    "Venus": (230, 200, 140),
    "Earth": (70, 130, 200),
    "Mars": (193, 68, 14),
    "Jupiter": (216, 170, 120),
    "Saturn": (227, 205, 150),
    "Uranus": (175, 225, 235),
    "Neptune": (60, 90, 210),
    "Pluto": (200, 180, 160),
}
_FALLBACK_COLOUR = (200, 200, 200)


def body_colour(name: str) -> tuple[int, int, int]:
    """Flat colour used for a body that has no texture."""
    return _COLOURS.get(name, _FALLBACK_COLOUR)


def _load_image(path: Path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (OSError, pygame.error):
        return None


class Window:
    """A window that draws a scene of bodies once per frame."""

    def __init__(
        self,
        bodies: Iterable[CelestialBody],
        *,
        size: tuple[int, int] = DEFAULT_SIZE,
        texture_dir: Optional[str | Path] = None,
        fps: int = TARGET_FPS,
    ) -> None:
        self.scene = Scene(bodies)
        pygame.init()
        self.surface = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        self._clock = pygame.time.Clock()
        self._fps = fps
        self._open = True
        self.background: Optional[pygame.Surface] = None
        self.textures: dict[str, pygame.Surface] = {}
        if texture_dir is not None:
            self._load_textures(Path(texture_dir))

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _load_textures(self, directory: Path) -> None:
        self.background = _load_image(directory / BACKGROUND_FILE)
        for body in self.scene.bodies:
            image = _load_image(directory / body.file_name)
            if image is not None:
                self.textures[body.name] = image

    def is_open(self) -> bool:
        """Whether the window has not been asked to close."""
        return self._open

    def update(self) -> None:
        """Handle events, advance the scene by one frame and draw it."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self._open = False
        if not self._open:
            return
        frame_time = self._clock.tick(self._fps) / 1000.0
        self.scene.update(frame_time)
        self._draw()
        pygame.display.flip()

    def close(self) -> None:
        """Release the display."""
        if pygame.get_init():
            pygame.quit()
        self._open = False

    def _draw(self) -> None:
        self.surface.fill(BACKGROUND_COLOUR)
        if self.background is not None:
            self.surface.blit(self.background, (0, 0))

        width, height = self.surface.get_size()
        camera = self.scene.camera
        focal = height / (2 * math.tan(math.radians(camera.fovy) / 2))

        visible = []
        for placement in self.scene.placements():
            projected = camera.project(placement.position, width, height)
            if projected is not None:
                x, y, depth = projected
                visible.append((depth, (round(x), round(y)), placement))

        # Farthest first, so nearer bodies are painted over them.
        visible.sort(key=lambda item: item[0], reverse=True)
        for depth, centre, placement in visible:
            radius = min(max(1, round(placement.radius * focal / depth)), _MAX_DISC_RADIUS)
            self._draw_body(placement, centre, radius)

    def _draw_body(
        self, placement: BodyPlacement, centre: tuple[int, int], radius: int
    ) -> None:
        texture = self.textures.get(placement.body.name)
        if texture is None:
            pygame.draw.circle(
                self.surface, body_colour(placement.body.name), centre, radius
            )
            return
        disc = self._textured_disc(texture, radius * 2, placement.axis_angle)
        self.surface.blit(disc, (centre[0] - radius, centre[1] - radius))

    @staticmethod
    def _textured_disc(
        texture: pygame.Surface, diameter: int, angle: float
    ) -> pygame.Surface:
        side = min(texture.get_size())
        rotated = pygame.transform.rotate(texture, angle)
        square = pygame.Rect(0, 0, side, side)
        square.center = rotated.get_rect().center
        cropped = rotated.subsurface(square)
        disc = pygame.transform.smoothscale(
            cropped.convert_alpha(), (diameter, diameter)
        )
        mask = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        pygame.draw.circle(
            mask, (255, 255, 255, 255), (diameter // 2, diameter // 2), diameter // 2
        )
        disc.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
        return disc


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the orrery window and run it until it is closed."""
    parser = argparse.ArgumentParser(description="Draw the solar system.")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE[0])
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE[1])
    parser.add_argument("--textures", default=DEFAULT_TEXTURE_DIR)
    parser.add_argument("--frames", type=int, default=None)
    args = parser.parse_args(argv)

    window = Window(
        get_solar_system(),
        size=(args.width, args.height),
        texture_dir=args.textures,
    )
    try:
        frames = 0
        while window.is_open() and (args.frames is None or frames < args.frames):
            window.update()
            frames += 1
    finally:
        window.close()
    return 0