"""Warp-speed starfield.

Stars live in a normalised view volume: ``sx`` and ``sy`` are lateral offsets
in ``[-1, 1)`` and ``z`` is the distance along the view axis.  Every tick the
stars move toward the viewer and the perspective divide pushes their projected
positions outward, which is what produces the streaking effect.  A star that
crosses the near plane is replaced in its slot by a fresh one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple

from .grid import DepthGrid
from .prng import Generator
from .settings import NEAR_EPSILON, WARP_SPEED, GlyphSet


LOGGER = logging.getLogger(__name__)

# Draw depth for the motion-blur dot; below every real star glyph.
TRAIL_DEPTH = 0.05
TRAIL_GLYPH = "."
# Stars nearer than this (in glyph depth) leave a trailing dot.
TRAIL_THRESHOLD = 0.7
TRAIL_OFFSET = 0.1

NEAR_GLYPHS = {GlyphSet.ASCII: "#", GlyphSet.UNICODE: "✦"}


@dataclass
class Star:
    """A single point in the starfield."""

    sx: float
    sy: float
    z: float


class Projection(NamedTuple):
    x: float
    y: float
    depth: float


def create_star(rng: Generator) -> Star:
    """Return a new star at a random lateral offset and depth."""

    sx = (rng.next() - 0.5) * 2
    sy = (rng.next() - 0.5) * 2
    z = 0.1 + rng.next() * 0.9
    return Star(sx=sx, sy=sy, z=z)


def project(
    star: Star, center_x: float, center_y: float, scale_x: float, scale_y: float
) -> Projection:
    """Perspective-project ``star`` onto grid coordinates.

    The returned ``depth`` is ``1 - z`` so nearer stars have larger values.
    """

    x = center_x + (star.sx / star.z) * scale_x
    y = center_y + (star.sy / star.z) * scale_y
    return Projection(x, y, 1 - star.z)


def glyph_for(depth: float, glyph_set: GlyphSet = GlyphSet.ASCII) -> str:
    """Map a projected depth to one of four brightness tiers."""

    if depth > 0.75:
        return "."
    if depth > 0.5:
        return "*"
    if depth > 0.25:
        return "+"
    return NEAR_GLYPHS[GlyphSet(glyph_set)]


def update_star(star: Star, dt: float, warp_speed: float = WARP_SPEED) -> bool:
    """Move ``star`` toward the viewer; return ``True`` once it needs respawning."""

    star.z -= warp_speed * dt
    return star.z <= NEAR_EPSILON


class StarField:
    """Fixed-size population of stars, respawned slot by slot."""

    def __init__(self, rng: Generator, count: int, *, warp_speed: float = WARP_SPEED) -> None:
        self._rng = rng
        self.warp_speed = warp_speed
        self.stars: List[Star] = [create_star(rng) for _ in range(count)]

    def __len__(self) -> int:
        return len(self.stars)

    def __iter__(self):
        return iter(self.stars)

    def respawn(self, slot: int) -> Star:
        """Replace the star in ``slot`` with a freshly generated one."""

        star = create_star(self._rng)
        self.stars[slot] = star
        return star

    def update(self, dt: float) -> int:
        """Advance every star by ``dt`` and return how many were respawned."""

        respawned = 0
        for slot, star in enumerate(self.stars):
            if update_star(star, dt, self.warp_speed):
                self.respawn(slot)
                respawned += 1
        if respawned:
            LOGGER.debug("Respawned %d star(s)", respawned)
        return respawned

    def draw(
        self,
        grid: DepthGrid,
        center_x: float,
        center_y: float,
        scale_x: float,
        scale_y: float,
        glyph_set: GlyphSet = GlyphSet.ASCII,
    ) -> None:
        for star in self.stars:
            px, py, depth = project(star, center_x, center_y, scale_x, scale_y)
            grid.write_cell(px, py, 0.1 + depth * 0.2, glyph_for(depth, glyph_set))
            if depth > TRAIL_THRESHOLD:
                dx = (star.sx / star.z) * scale_x * TRAIL_OFFSET
                dy = (star.sy / star.z) * scale_y * TRAIL_OFFSET
                grid.write_cell(px - dx, py - dy, TRAIL_DEPTH, TRAIL_GLYPH)


__all__ = [
    "Projection",
    "Star",
    "StarField",
    "create_star",
    "glyph_for",
    "project",
    "update_star",
]
