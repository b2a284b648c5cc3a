"""Bug 1 and Bug 2 planners for a point robot among polygonal obstacles."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

import numpy as np

from motionplan.environment import Path2D, Polygon, Problem2D
from motionplan.geometry import (
    TurnDirection,
    boundary_following_step,
    crosses_m_line,
    norm2,
    segment_hits_obstacles,
)


class _Mode(enum.Enum):
    MOVE_TO_GOAL = enum.auto()
    FOLLOW_BOUNDARY = enum.auto()
    GO_TO_LEAVE_POINT = enum.auto()


def _with_workspace_boundary(problem: Problem2D) -> list[Polygon]:
    """Obstacles of the problem plus the workspace rectangle treated as an obstacle."""
    corners = [
        (problem.x_min, problem.y_min),
        (problem.x_max, problem.y_min),
        (problem.x_max, problem.y_max),
        (problem.x_min, problem.y_max),
    ]
    return [*problem.obstacles, Polygon(corners)]


def _step_towards(src: np.ndarray, goal: np.ndarray, step_size: float) -> np.ndarray:
    to_goal = goal - src
    distance = norm2(to_goal)
    if distance == 0:
        return np.zeros(2)
    return to_goal / distance * step_size


def _opposite(direction: TurnDirection) -> TurnDirection:
    return TurnDirection.RIGHT if direction is TurnDirection.LEFT else TurnDirection.LEFT


@dataclass
class Bug1:
    """Bug 1: circle each obstacle fully, then leave from the point closest to the goal."""

    step_size: float = 0.01
    d_theta: float = math.pi / 75
    turning_direction: TurnDirection = TurnDirection.LEFT
    goal_tolerance: float = 0.1
    return_tolerance: float = 0.01
    max_iterations: int = 100_000
    max_boundary_steps: int = 150_000
    max_leave_steps: int = 150_000

    def plan(self, problem: Problem2D) -> Path2D:
        """Plan a path from the problem's start to its goal."""
        obstacles = _with_workspace_boundary(problem)
        goal = problem.q_goal
        curr = problem.q_init + self.step_size * np.array([0.0, 1.0])
        waypoints = [problem.q_init.copy(), curr.copy()]

        mode = _Mode.MOVE_TO_GOAL
        step = np.zeros(2)
        q_hit = curr.copy()
        dist_to_goal: list[float] = []
        boundary_points: list[np.ndarray] = []
        follow_count = 0
        boundary_steps = 0
        leave_steps = 0

        for _ in range(self.max_iterations):
            if mode is _Mode.MOVE_TO_GOAL:
                step = _step_towards(curr, goal, self.step_size)
                new_wp = curr + step
                if segment_hits_obstacles(obstacles, curr, new_wp):
                    mode = _Mode.FOLLOW_BOUNDARY
                    q_hit = curr.copy()
                else:
                    waypoints.append(new_wp)
                    curr = new_wp

            elif mode is _Mode.FOLLOW_BOUNDARY:
                while boundary_steps < self.max_boundary_steps:
                    step = boundary_following_step(
                        obstacles, curr, step, self.d_theta, self.turning_direction
                    )
                    new_wp = curr + step
                    waypoints.append(new_wp)
                    dist_to_goal.append(norm2(curr - goal))
                    boundary_points.append(curr)
                    curr = new_wp
                    if norm2(curr - q_hit) < self.return_tolerance and follow_count > 10:
                        mode = _Mode.GO_TO_LEAVE_POINT
                        break
                    follow_count += 1
                    boundary_steps += 1

            else:
                min_index = min(range(len(dist_to_goal)), key=dist_to_goal.__getitem__)
                q_leave = boundary_points[min_index]
                direction = self.turning_direction
                if min_index > len(boundary_points) // 2:
                    direction = _opposite(direction)

                follow_count = 0
                while leave_steps < self.max_leave_steps:
                    step = boundary_following_step(obstacles, curr, step, self.d_theta, direction)
                    curr = curr + step
                    waypoints.append(curr)
                    if norm2(curr - q_leave) < self.return_tolerance and follow_count > 10:
                        mode = _Mode.MOVE_TO_GOAL
                        dist_to_goal.clear()
                        boundary_points.clear()
                        break
                    leave_steps += 1
                    follow_count += 1

            if norm2(goal - curr) < self.goal_tolerance:
                break

        waypoints.append(goal.copy())
        return Path2D(waypoints)


@dataclass
class Bug2:
    """Bug 2: follow obstacle boundaries until the start-goal line is met closer to the goal."""

    step_size: float = 0.003
    d_theta: float = math.pi / 75
    turning_direction: TurnDirection = TurnDirection.LEFT
    goal_tolerance: float = 0.1
    max_iterations: int = 10_000
    max_boundary_steps: int = 500_000

    def plan(self, problem: Problem2D) -> Path2D:
        """Plan a path from the problem's start to its goal."""
        obstacles = _with_workspace_boundary(problem)
        q_init = problem.q_init
        goal = problem.q_goal
        curr = q_init.copy()
        waypoints = [q_init.copy(), curr.copy()]

        mode = _Mode.MOVE_TO_GOAL
        step = np.zeros(2)
        dist_hit_to_goal = math.inf
        boundary_steps = 0

        for _ in range(self.max_iterations):
            if mode is _Mode.MOVE_TO_GOAL:
                step = _step_towards(curr, goal, self.step_size)
                new_wp = curr + step
                if segment_hits_obstacles(obstacles, curr, new_wp):
                    mode = _Mode.FOLLOW_BOUNDARY
                    dist_hit_to_goal = norm2(goal - curr)
                else:
                    waypoints.append(new_wp)
                    curr = new_wp
            else:
                while boundary_steps < self.max_boundary_steps:
                    step = boundary_following_step(
                        obstacles, curr, step, self.d_theta, self.turning_direction
                    )
                    new_wp = curr + step
                    if (
                        crosses_m_line(q_init, goal, curr, new_wp)
                        and norm2(goal - curr) < dist_hit_to_goal
                    ):
                        step = _step_towards(curr, goal, self.step_size)
                        if not segment_hits_obstacles(obstacles, curr, curr + step):
                            mode = _Mode.MOVE_TO_GOAL
                            break
                    waypoints.append(new_wp)
                    curr = new_wp
                    boundary_steps += 1

            if norm2(goal - curr) < self.goal_tolerance:
                break

        waypoints.append(goal.copy())
        return Path2D(waypoints)