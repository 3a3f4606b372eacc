"""Tunable constants and run configuration for the warp animation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Ticks per second driven by the runner.
FPS = 30
# Number of sprite icons kept in flight.
NUM_OBJECTS = 14
# Rate at which stars approach the viewer, in depth units per second.
WARP_SPEED = 0.6
# Projection scale as a fraction of the grid width/height.
SCALE_X_FACTOR = 0.35
SCALE_Y_FACTOR = 0.55
# Stars at or nearer than this depth are respawned.
NEAR_EPSILON = 0.02
OBJECT_SPEED_FACTOR = 3.0
# Sprites further than this many cells outside the grid are respawned.
SPAWN_MARGIN = 10
SPAWN_RADIUS_FACTOR = 0.35
# One star per this many grid cells, up to ``MAX_STARS``.
STAR_DENSITY = 18
MAX_STARS = 1200

DEFAULT_SEED = 12345
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

MAX_SEED = 0xFFFFFFFF


def spawn_radius(width: int, height: int) -> float:
    """Radius of the ring sprites are (re)spawned on, in cells."""

    return min(width, height) * SPAWN_RADIUS_FACTOR


class GlyphSet(str, Enum):
    """Glyph repertoire used for the nearest star tier."""

    ASCII = "ascii"
    UNICODE = "unicode"


@dataclass(frozen=True)
class WarpSettings:
    """Immutable configuration handed to the engine by the boundary layer."""

    seed: int = DEFAULT_SEED
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    glyph_set: GlyphSet = GlyphSet.ASCII
    fps: int = FPS
    num_objects: int = NUM_OBJECTS

    def validate(self) -> "WarpSettings":
        """Return ``self`` after checking the configuration is usable.

        Raises:
            ValueError: If any dimension or rate is out of range.
        """

        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.fps < 1:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.num_objects < 0:
            raise ValueError(f"num_objects cannot be negative, got {self.num_objects}")
        if not 0 <= self.seed <= MAX_SEED:
            raise ValueError(f"seed must be an unsigned 32-bit integer, got {self.seed}")
        return self

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def scale(self) -> tuple[float, float]:
        return self.width * SCALE_X_FACTOR, self.height * SCALE_Y_FACTOR

    @property
    def spawn_radius(self) -> float:
        return spawn_radius(self.width, self.height)

    @property
    def star_count(self) -> int:
        return min(MAX_STARS, (self.width * self.height) // STAR_DENSITY)

    @property
    def dt(self) -> float:
        """Simulation time step for one tick, in seconds."""

        return 1 / self.fps
