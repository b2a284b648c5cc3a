"""Gradient descent on an attractive-repulsive potential field."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import ClassVar, Iterable

import numpy as np

from motionplan.environment import Path2D, Problem2D
from motionplan.geometry import norm2, potential_gradient


@dataclass
class AttractiveRepulsivePotential:
    """Potential over a problem's workspace.

    Its height, used for plotting, is the squared distance from the origin;
    its gradient is the attractive-plus-repulsive field of the problem.
    """

    problem: Problem2D
    d_star: float = 0.5
    zetta: float = 1.0
    q_star: float = 1.0
    eta: float = 1.0

    def __call__(self, q: Iterable[float]) -> float:
        p = np.asarray(q, dtype=float)
        return float(p[0] * p[0] + p[1] * p[1])

    def gradient(self, q: Iterable[float]) -> np.ndarray:
        """Gradient of the attractive-plus-repulsive field at q."""
        return potential_gradient(
            q, self.problem, self.d_star, self.zetta, self.q_star, self.eta
        )


@dataclass
class GradientDescentPlanner:
    """Descends the potential field, kicking the robot when the gradient vanishes."""

    d_star: float
    zetta: float
    q_star: float
    eta: float
    rng: random.Random | None = field(default=None)

    max_iterations: ClassVar[int] = 10_000
    goal_tolerance: ClassVar[float] = 0.25
    step_scale: ClassVar[float] = 0.05
    stall_threshold: ClassVar[float] = 1e-5
    kick_length: ClassVar[float] = 0.01
    fixed_kick_center: ClassVar[tuple[float, float]] = (0.6, 0.6)
    fixed_kick_radius: ClassVar[float] = 0.2

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()

    def _kick_angle(self, q: np.ndarray) -> int:
        if norm2(q - np.array(self.fixed_kick_center)) < self.fixed_kick_radius:
            return 0
        return int(self.rng.random() * 2 * math.pi)

    def plan(self, problem: Problem2D) -> Path2D:
        """Path from the problem's start towards its goal, ending at the goal."""
        goal = problem.q_goal
        waypoints = [problem.q_init.copy()]
        new_q = problem.q_init.copy()
        for _ in range(self.max_iterations):
            if norm2(new_q - goal) <= self.goal_tolerance:
                break
            current = waypoints[-1]
            grad = potential_gradient(
                current, problem, self.d_star, self.zetta, self.q_star, self.eta
            )
            if norm2(grad) < self.stall_threshold:
                angle = self._kick_angle(new_q)
                new_q = current + self.kick_length * np.array([math.cos(angle), math.sin(angle)])
            else:
                new_q = current - self.step_scale * grad
            waypoints.append(new_q)
        waypoints.append(goal.copy())
        return Path2D(waypoints)