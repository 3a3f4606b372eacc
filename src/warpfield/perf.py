"""Per-section timing for profiling the render loop."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional


Row = Dict[str, float | int | str]


@dataclass
class PerfStat:
    """Aggregated timings for one labelled section."""

    count: int = 0
    total: float = 0.0
    self_time: float = 0.0
    max_time: float = 0.0

    def add(self, total: float, exclusive: float) -> None:
        self.count += 1
        self.total += total
        self.self_time += exclusive
        self.max_time = max(self.max_time, total)

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0


@dataclass
class _Frame:
    name: str
    start: float
    children: float = 0.0


class PerformanceTracker:
    """Collect inclusive and exclusive run times of named code sections.

    Sections may nest; time spent in a child section is subtracted from the
    parent's exclusive ("self") time.
    """

    SORT_KEYS = ("total", "self", "count", "average", "max")

    def __init__(
        self,
        *,
        clock: Optional[Callable[[], float]] = None,
        enabled: bool = True,
    ) -> None:
        self._clock = clock or time.perf_counter
        self.enabled = enabled
        self._stats: Dict[str, PerfStat] = {}
        self._stack: List[_Frame] = []

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def reset(self) -> None:
        """Drop every recorded sample."""

        self._stats.clear()
        self._stack.clear()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the body of a ``with`` block under ``name``."""

        if not self.enabled:
            yield
            return
        frame = _Frame(name=name, start=self._clock())
        self._stack.append(frame)
        try:
            yield
        finally:
            self._finish(frame)

    def _finish(self, frame: _Frame) -> None:
        if not self._stack or self._stack[-1] is not frame:
            raise RuntimeError("Timer stack out of sync")
        self._stack.pop()
        elapsed = self._clock() - frame.start
        exclusive = max(0.0, elapsed - frame.children)
        self._stats.setdefault(frame.name, PerfStat()).add(elapsed, exclusive)
        if self._stack:
            self._stack[-1].children += elapsed

    def stat(self, name: str) -> Optional[PerfStat]:
        return self._stats.get(name)

    def summary(self, *, sort_by: str = "total", descending: bool = True) -> List[Row]:
        """Return one row per section, sorted by ``sort_by``."""

        if sort_by not in self.SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_by}")
        rows: List[Row] = [
            {
                "name": name,
                "count": stat.count,
                "total": stat.total,
                "self": stat.self_time,
                "average": stat.average,
                "max": stat.max_time,
            }
            for name, stat in self._stats.items()
        ]
        rows.sort(key=lambda row: row[sort_by], reverse=descending)
        return rows


def format_summary(summary: List[Row], limit: int = 10) -> str:
    """Render ``summary`` rows as a single log-friendly line."""

    if not summary or limit <= 0:
        return "No timings recorded."
    parts = []
    for row in summary[:limit]:
        parts.append(
            f"{row['name']}: total={row['total'] * 1000.0:.3f}ms, "
            f"self={row['self'] * 1000.0:.3f}ms, count={int(row['count'])}, "
            f"avg={row['average'] * 1000.0:.3f}ms"
        )
    return "; ".join(parts)


__all__ = ["PerfStat", "PerformanceTracker", "format_summary"]
