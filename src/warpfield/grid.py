"""Depth-buffered character grid used as the render target."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


BLANK = " "

CharGrid = NDArray[np.str_]
DepthBuffer = NDArray[np.float64]


def _to_cell(value: float) -> int:
    # Round half up so that ``x.5`` lands on the right-hand cell.
    return math.floor(value + 0.5)


class DepthGrid:
    """Fixed-size character grid paired with a per-cell depth buffer.

    Larger depth values are nearer to the viewer.  A write only lands when its
    depth strictly exceeds what the cell already holds, so equal depths keep
    whatever was drawn first.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.chars: CharGrid = np.full((height, width), BLANK, dtype="<U1")
        self.depth: DepthBuffer = np.full((height, width), -np.inf, dtype=np.float64)

    def clear(self) -> None:
        """Blank every cell and reset every depth to ``-inf``."""

        self.chars.fill(BLANK)
        self.depth.fill(-np.inf)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def get_cell(self, col: int, row: int) -> str:
        """Return the glyph at ``(col, row)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if self.in_bounds(col, row):
            return str(self.chars[row, col])
        raise IndexError("Cell out of bounds")

    def get_depth(self, col: int, row: int) -> float:
        """Return the stored depth at ``(col, row)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if self.in_bounds(col, row):
            return float(self.depth[row, col])
        raise IndexError("Cell out of bounds")

    def write_cell(self, x: float, y: float, depth: float, glyph: str) -> bool:
        """Depth-tested write of ``glyph`` at the cell nearest ``(x, y)``.

        Coordinates that are not finite or fall outside the grid are dropped
        without error.  Returns ``True`` when the cell was updated.
        """

        if not (math.isfinite(x) and math.isfinite(y)):
            return False
        col = _to_cell(x)
        row = _to_cell(y)
        if not self.in_bounds(col, row):
            return False
        if depth > self.depth[row, col]:
            self.depth[row, col] = depth
            self.chars[row, col] = glyph
            return True
        return False

    def blit(
        self,
        x: float,
        y: float,
        depth: float,
        lines: Sequence[str],
        center_anchored: bool = True,
        opaque: bool = False,
    ) -> None:
        """Draw a multi-line glyph block through :meth:`write_cell`.

        When ``center_anchored`` is set, ``(x, y)`` is the visual centre of the
        block.  Blank source characters are transparent unless ``opaque``.
        """

        if not lines:
            return
        max_width = max(len(line) for line in lines)
        left = x - max_width // 2 if center_anchored else x
        top = y - len(lines) // 2 if center_anchored else y
        for row, line in enumerate(lines):
            for col, glyph in enumerate(line):
                if glyph != BLANK or opaque:
                    self.write_cell(left + col, top + row, depth, glyph)

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.chars]

    def serialize(self) -> str:
        """Return the grid as ``height`` newline-joined lines of text."""

        return "\n".join(self.rows())


__all__ = ["BLANK", "DepthGrid"]
