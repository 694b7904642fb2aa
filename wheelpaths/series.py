"""
Projections of trajectories into plain point lists for the charts.

Both builders accept None or empty input and return an empty list, so the
presentation side always gets something plottable.
"""

from typing import Iterable, Optional

from .trajectory import DeltaSegment, prefix_times

Point = tuple[float, float]


def position_series(items: Optional[Iterable]) -> list[Point]:
    """
    (x, y) per item, order preserved.

    Works for anything with x and y attributes: a Trajectory, a list of
    TrajectorySample or DeltaSegment, or the raw waypoint list.
    """
    if items is None:
        return []
    return [(float(item.x), float(item.y)) for item in items]


def velocity_series(items: Optional[Iterable]) -> list[Point]:
    """
    (t, velocity) per sample.

    Absolute-time samples keep their own t. Delta-time segments get t from the
    sum of the intervals before them, so the first point sits at 0.
    """
    if items is None:
        return []
    items = list(items)
    if not items:
        return []

    if isinstance(items[0], DeltaSegment):
        times = prefix_times(seg.dt for seg in items)
    else:
        times = [s.t for s in items]

    return [(float(t), float(item.velocity)) for t, item in zip(times, items)]
