"""Deterministic ASCII warp-speed starfield with a centred logo."""

from .prng import Generator
from .grid import DepthGrid
from .settings import GlyphSet, WarpSettings
from .stars import Star, StarField, create_star, glyph_for, project, update_star
from .sprites import SpriteKind, SpriteObject, SpritePopulation, spawn_sprite, update_sprite
from .logo import LOGO_LINES, prepare_logo
from .composer import FrameComposer
from .perf import PerfStat, PerformanceTracker

__all__ = [
    "DepthGrid",
    "FrameComposer",
    "Generator",
    "GlyphSet",
    "LOGO_LINES",
    "PerfStat",
    "PerformanceTracker",
    "SpriteKind",
    "SpriteObject",
    "SpritePopulation",
    "Star",
    "StarField",
    "WarpSettings",
    "create_star",
    "glyph_for",
    "prepare_logo",
    "project",
    "spawn_sprite",
    "update_sprite",
]
