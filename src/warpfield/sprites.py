"""Sprite icons drifting outward from a ring around the logo.

Each sprite is a small multi-line glyph block with two animation frames.  The
frame shown is derived from the global simulation time, so every sprite blinks
in step regardless of when it was spawned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from .grid import DepthGrid
from .prng import Generator
from .settings import OBJECT_SPEED_FACTOR, SPAWN_MARGIN, WARP_SPEED, spawn_radius


LOGGER = logging.getLogger(__name__)

Frame = Tuple[str, ...]

# Extra ring distance added to the spawn radius, in cells.
RING_JITTER = 8


class SpriteKind(str, Enum):
    """Enumeration of the security/dev icons that orbit the logo."""

    LOCK = "lock"
    SHIELD = "shield"
    KEY = "key"
    CLOUD = "cloud"
    SERVER = "server"
    CODE = "code"
    GEAR = "gear"
    CHART = "chart"
    GLOBE = "globe"
    WINDOW = "window"


# Art for each icon in its resting frame.  Both animation frames currently
# share the same art; ``SPRITE_FRAMES`` is where a second pose would go.
_BASE_ART: Dict[SpriteKind, Frame] = {
    SpriteKind.LOCK: (" .-. ", "(   )", " | | ", " |_| "),
    SpriteKind.SHIELD: (" /\\ ", "/__\\", "\\  /", " \\/ "),
    SpriteKind.KEY: (" _  ", "/ )=", "\\_)=", "    "),
    SpriteKind.CLOUD: (" .--. ", "(____)", "      "),
    SpriteKind.SERVER: ("[==]", "[==]", "    "),
    SpriteKind.CODE: ("</>", "   "),
    SpriteKind.GEAR: (" _o_ ", "/___\\", " \\o/ ", "     "),
    SpriteKind.CHART: ("|#.", "|##", "   "),
    SpriteKind.GLOBE: (" .-. ", "( + )", " '-' ", "     "),
    SpriteKind.WINDOW: ("+--+", "|[]|", "+--+", "    "),
}

SPRITE_FRAMES: Dict[SpriteKind, Tuple[Frame, Frame]] = {
    kind: (art, art) for kind, art in _BASE_ART.items()
}

SPRITE_KINDS: Tuple[SpriteKind, ...] = tuple(SpriteKind)


@dataclass
class SpriteObject:
    """An icon travelling on a straight line away from the grid centre."""

    kind: SpriteKind
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    z: float
    frame: int = 0

    def lines(self) -> Frame:
        """Return the glyph block for the current animation frame."""

        return SPRITE_FRAMES[self.kind][self.frame]


def spawn_sprite(
    rng: Generator,
    center_x: float,
    center_y: float,
    radius: float,
    scale_x: float,
    scale_y: float,
) -> SpriteObject:
    """Place a new sprite on the spawn ring, heading outward.

    Randomness is drawn in a fixed order (angle, speed jitter, kind, ring
    offset, depth) so a seed always yields the same sprite.
    """

    angle = rng.next() * math.pi * 2
    base_speed = ((scale_x + scale_y) / 2) * WARP_SPEED * OBJECT_SPEED_FACTOR
    speed = base_speed * (0.8 + rng.next() * 0.4)
    kind = SPRITE_KINDS[rng.next_int(0, len(SPRITE_KINDS) - 1)]
    r = radius + rng.next() * RING_JITTER
    return SpriteObject(
        kind=kind,
        position=(center_x + math.cos(angle) * r, center_y + math.sin(angle) * r),
        velocity=(math.cos(angle) * speed, math.sin(angle) * speed),
        z=0.5 + rng.next() * 0.3,
    )


def update_sprite(obj: SpriteObject, dt: float, t: float) -> None:
    """Integrate ``obj`` forward by ``dt`` and set its frame for time ``t``."""

    x, y = obj.position
    vx, vy = obj.velocity
    obj.position = (x + vx * dt, y + vy * dt)
    obj.frame = math.floor(t * 2) % 2


def is_outside(obj: SpriteObject, width: int, height: int, margin: float = SPAWN_MARGIN) -> bool:
    """Return ``True`` if ``obj`` has drifted beyond ``margin`` cells off the grid."""

    x, y = obj.position
    return x < -margin or x > width + margin or y < -margin or y > height + margin


@dataclass
class SpritePopulation:
    """Fixed number of sprites, each slot respawned once it leaves the grid."""

    rng: Generator
    count: int
    width: int
    height: int
    scale_x: float
    scale_y: float
    margin: float = SPAWN_MARGIN
    objects: List[SpriteObject] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.objects = [self._spawn() for _ in range(self.count)]

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def radius(self) -> float:
        return spawn_radius(self.width, self.height)

    def __len__(self) -> int:
        return len(self.objects)

    def _spawn(self) -> SpriteObject:
        cx, cy = self.center
        return spawn_sprite(self.rng, cx, cy, self.radius, self.scale_x, self.scale_y)

    def respawn(self, slot: int) -> SpriteObject:
        """Replace the sprite in ``slot`` with a new one on the spawn ring."""

        obj = self._spawn()
        self.objects[slot] = obj
        return obj

    def update(self, dt: float, t: float) -> int:
        """Move every sprite and respawn the ones that escaped; return the count."""

        respawned = 0
        for slot, obj in enumerate(self.objects):
            update_sprite(obj, dt, t)
            if is_outside(obj, self.width, self.height, self.margin):
                self.respawn(slot)
                respawned += 1
        if respawned:
            LOGGER.debug("Respawned %d sprite(s)", respawned)
        return respawned

    def draw(self, grid: DepthGrid) -> None:
        for obj in self.objects:
            x, y = obj.position
            grid.blit(x, y, obj.z, obj.lines())


__all__ = [
    "SPRITE_FRAMES",
    "SpriteKind",
    "SpriteObject",
    "SpritePopulation",
    "is_outside",
    "spawn_radius",
    "spawn_sprite",
    "update_sprite",
]
