"""Frame composition: one tick of simulation plus rasterisation.

Each tick runs a fixed pipeline::

    clear -> update/draw stars -> update/draw sprites -> logo (opaque) -> text

Stars and sprites resolve overlaps through the depth buffer.  The logo is
blitted last and opaquely so nothing drawn before it can show through.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Iterator, Optional, Sequence

from .grid import DepthGrid
from .logo import LOGO_LINES
from .perf import PerformanceTracker
from .prng import Generator
from .settings import WarpSettings
from .sprites import SpritePopulation
from .stars import StarField


LOGGER = logging.getLogger(__name__)

LOGO_DEPTH = 1.0


class FrameComposer:
    """Own the grid and entity populations for a single animation run.

    The generator is supplied by the caller; all randomness flows through it in
    a fixed order (stars first, then sprites) so a given seed always produces
    the same sequence of frames.
    """

    def __init__(
        self,
        settings: WarpSettings,
        rng: Optional[Generator] = None,
        *,
        logo: Sequence[str] = LOGO_LINES,
        profiler: Optional[PerformanceTracker] = None,
    ) -> None:
        self.settings = settings.validate()
        self.rng = rng if rng is not None else Generator(settings.seed)
        self.profiler = profiler
        self.logo = tuple(logo)
        self.grid = DepthGrid(settings.width, settings.height)
        self.center_x, self.center_y = settings.center
        self.scale_x, self.scale_y = settings.scale
        self.t = 0.0
        self.ticks = 0
        self.stars = StarField(self.rng, settings.star_count)
        self.sprites = SpritePopulation(
            rng=self.rng,
            count=settings.num_objects,
            width=settings.width,
            height=settings.height,
            scale_x=self.scale_x,
            scale_y=self.scale_y,
        )
        LOGGER.debug(
            "Composer ready: %dx%d grid, %d stars, %d sprites, seed %d",
            settings.width,
            settings.height,
            len(self.stars),
            len(self.sprites),
            settings.seed,
        )

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def update(self, dt: float) -> None:
        """Advance simulation time by ``dt`` and move every entity."""

        self.t += dt
        self.ticks += 1
        with self._section("update.stars"):
            self.stars.update(dt)
        with self._section("update.sprites"):
            self.sprites.update(dt, self.t)

    def compose(self) -> str:
        """Rasterise the current state and return it as text."""

        grid = self.grid
        grid.clear()
        with self._section("draw.stars"):
            self.stars.draw(
                grid,
                self.center_x,
                self.center_y,
                self.scale_x,
                self.scale_y,
                self.settings.glyph_set,
            )
        with self._section("draw.sprites"):
            self.sprites.draw(grid)
        with self._section("draw.logo"):
            grid.blit(
                self.center_x,
                self.center_y,
                LOGO_DEPTH,
                self.logo,
                center_anchored=True,
                opaque=True,
            )
        with self._section("serialize"):
            return grid.serialize()

    def step(self, dt: Optional[float] = None) -> str:
        """Run one full tick and return the resulting frame."""

        with self._section("tick"):
            self.update(self.settings.dt if dt is None else dt)
            return self.compose()

    def frames(self, count: Optional[int] = None) -> Iterator[str]:
        """Yield ``count`` successive frames, or frames forever if ``None``."""

        produced = 0
        while count is None or produced < count:
            yield self.step()
            produced += 1


__all__ = ["FrameComposer", "LOGO_DEPTH"]
