"""Multi-agent problem types and baseline planners."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from motionplan.environment import Environment2D, Path2D


def _as_point(value: Iterable[float]) -> np.ndarray:
    return np.asarray(value, dtype=float).copy()


@dataclass
class CircularAgentProperties:
    """A disc-shaped agent with its start and goal."""

    radius: float = 0.5
    q_init: np.ndarray = field(default_factory=lambda: np.zeros(2))
    q_goal: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.q_init = _as_point(self.q_init)
        self.q_goal = _as_point(self.q_goal)


@dataclass
class MultiAgentProblem2D(Environment2D):
    """A workspace shared by several circular agents."""

    agent_properties: list[CircularAgentProperties] = field(default_factory=list)

    @property
    def num_agents(self) -> int:
        return len(self.agent_properties)


@dataclass
class MultiAgentPath2D:
    """One path per agent, in the order of the problem's agents."""

    agent_paths: list[Path2D] = field(default_factory=list)

    @property
    def num_agents(self) -> int:
        return len(self.agent_paths)


def _straight_paths(problem: MultiAgentProblem2D) -> MultiAgentPath2D:
    return MultiAgentPath2D(
        [Path2D([agent.q_init, agent.q_goal]) for agent in problem.agent_properties]
    )


class CentralPlanner:
    """Centralized planner giving each agent a straight path to its goal."""

    def plan(self, problem: MultiAgentProblem2D) -> MultiAgentPath2D:
        """Straight start-to-goal path for every agent."""
        return _straight_paths(problem)


class DecentralPlanner:
    """Decentralized planner giving each agent a straight path to its goal."""

    def plan(self, problem: MultiAgentProblem2D) -> MultiAgentPath2D:
        """Straight start-to-goal path for every agent."""
        return _straight_paths(problem)