"""Workspace, problem and path types shared by the planners."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def _as_point(value: Iterable[float]) -> np.ndarray:
    return np.asarray(value, dtype=float).copy()


@dataclass
class Polygon:
    """A polygon whose vertices are stored in counter-clockwise order."""

    vertices: list[np.ndarray] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices = [_as_point(v) for v in self.vertices]

    def vertices_ccw(self) -> list[np.ndarray]:
        """Return copies of the vertices in counter-clockwise order."""
        return [v.copy() for v in self.vertices]

    def vertices_cw(self) -> list[np.ndarray]:
        """Return copies of the vertices in clockwise order."""
        return [v.copy() for v in reversed(self.vertices)]


@dataclass
class Environment2D:
    """A rectangular workspace holding polygonal obstacles."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0
    obstacles: list[Polygon] = field(default_factory=list)


@dataclass
class Problem2D(Environment2D):
    """A workspace together with a start and a goal point."""

    q_init: np.ndarray = field(default_factory=lambda: np.zeros(2))
    q_goal: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.q_init = _as_point(self.q_init)
        self.q_goal = _as_point(self.q_goal)


@dataclass
class Path2D:
    """An ordered list of waypoints."""

    waypoints: list[np.ndarray] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.waypoints = [_as_point(w) for w in self.waypoints]

    def length(self) -> float:
        """Total Euclidean length along the waypoints."""
        return float(
            sum(np.linalg.norm(b - a) for a, b in zip(self.waypoints, self.waypoints[1:]))
        )


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def unwrap_waypoints(
    waypoints: Sequence[Iterable[float]],
    lower_bounds: Iterable[float],
    upper_bounds: Iterable[float],
) -> list[np.ndarray]:
    """Return waypoints shifted by whole periods so that consecutive points stay close.

    Each coordinate is treated as periodic over [lower, upper]. A warning is
    logged for any coordinate found outside its bounds.
    """
    lower = _as_point(lower_bounds)
    upper = _as_point(upper_bounds)
    scale = upper - lower
    result = [_as_point(w) for w in waypoints]
    for src, dst in zip(result, result[1:]):
        for i, (s, d) in enumerate(zip(src, dst)):
            if d < lower[i] or d > upper[i]:
                logger.warning(
                    "Value: %s is outside the bounds [%s, %s] for dimension %d",
                    d, lower[i], upper[i], i,
                )
            n = _round_half_away((s - d) / scale[i])
            dst[i] = d + n * scale[i]
    return result


def unwrap_path(
    path: Path2D, lower_bounds: Iterable[float], upper_bounds: Iterable[float]
) -> Path2D:
    """Return a new path whose waypoints have been unwrapped."""
    return Path2D(unwrap_waypoints(path.waypoints, lower_bounds, upper_bounds))