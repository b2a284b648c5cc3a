"""Planar geometry helpers: segment tests, rotations, Minkowski sums, potentials."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Sequence

import numpy as np

from motionplan.environment import Environment2D, Polygon, Problem2D


class Orientation(enum.IntEnum):
    """Orientation of an ordered point triple."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


class TurnDirection(enum.Enum):
    """Side on which a boundary-following robot turns."""

    LEFT = "left"
    RIGHT = "right"


def _pt(value: Iterable[float]) -> np.ndarray:
    return np.asarray(value, dtype=float)


def norm2(vec: Iterable[float]) -> float:
    """Euclidean norm of a 2D vector."""
    v = _pt(vec)
    return math.sqrt(v[0] ** 2 + v[1] ** 2)


def sum_elements(values: Iterable[float]) -> float:
    """Sum of the values as a float."""
    return float(sum(values, 0.0))


def on_segment(p, q, r) -> bool:
    """Whether q lies in the bounding box of segment pr."""
    p, q, r = _pt(p), _pt(q), _pt(r)
    return (
        min(p[0], r[0]) <= q[0] <= max(p[0], r[0])
        and min(p[1], r[1]) <= q[1] <= max(p[1], r[1])
    )


def orientation(p, q, r) -> Orientation:
    """Orientation of the ordered triple (p, q, r)."""
    p, q, r = _pt(p), _pt(q), _pt(r)
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def _edges(obstacle: Polygon):
    vtxs = obstacle.vertices_cw()
    return zip(vtxs, vtxs[1:] + vtxs[:1])


def _intersection_hits(p1, q1, p2, q2) -> int:
    """Number of intersection conditions met by segments p1q1 and p2q2."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)
    conditions = (
        o1 != o2 and o3 != o4,
        o1 == Orientation.COLLINEAR and on_segment(p1, p2, q1),
        o2 == Orientation.COLLINEAR and on_segment(p1, q2, q1),
        o3 == Orientation.COLLINEAR and on_segment(p2, p1, q2),
        o4 == Orientation.COLLINEAR and on_segment(p2, q1, q2),
    )
    return sum(conditions)


def segment_hits_obstacles(obstacles: Iterable[Polygon], start, end) -> bool:
    """Whether the segment start-end touches any obstacle edge."""
    start, end = _pt(start), _pt(end)
    return any(
        _intersection_hits(a, b, start, end) > 0
        for obs in obstacles
        for a, b in _edges(obs)
    )


def count_intersections(obstacles: Iterable[Polygon], start, end) -> int:
    """Count intersection conditions between the segment and all obstacle edges."""
    start, end = _pt(start), _pt(end)
    return sum(
        _intersection_hits(a, b, start, end) for obs in obstacles for a, b in _edges(obs)
    )


def crosses_m_line(q_init, q_goal, curr_pos, next_pos) -> bool:
    """Whether the step curr_pos -> next_pos crosses or touches the line through q_init and q_goal."""
    q_init, q_goal = _pt(q_init), _pt(q_goal)
    curr_pos, next_pos = _pt(curr_pos), _pt(next_pos)
    if q_init[0] == q_goal[0]:
        f1 = curr_pos[0] - q_init[0]
        f2 = next_pos[0] - q_init[0]
    else:
        m = (q_goal[1] - q_init[1]) / (q_goal[0] - q_init[0])
        f1 = curr_pos[1] - m * (curr_pos[0] - q_init[0]) + q_init[1]
        f2 = next_pos[1] - m * (next_pos[0] - q_init[0]) + q_init[1]
    return (f1 < 0 < f2) or (f2 < 0 < f1) or f1 == 0 or f2 == 0


def rotate(vec, theta: float) -> np.ndarray:
    """Rotate a 2D vector counter-clockwise by theta radians."""
    v = _pt(vec)
    c, s = math.cos(theta), math.sin(theta)
    return np.array([c * v[0] - s * v[1], s * v[0] + c * v[1]])


def is_point_in_collision(env: Environment2D, q) -> bool:
    """Point-in-obstacle test by casting a ray from the left workspace edge."""
    q = _pt(q)
    far_left = np.array([env.x_min, q[1]])
    return count_intersections(env.obstacles, far_left, q) % 2 == 1


def boundary_following_step(
    obstacles: Sequence[Polygon],
    curr_pos,
    curr_step,
    d_theta: float,
    turning_direction: TurnDirection,
) -> np.ndarray:
    """Rotate the current step until it runs along an obstacle boundary.

    The sight point (ahead) must be free while the touch point, 45 degrees
    towards the obstacle side, must be in contact. Raises RuntimeError when
    no such direction is found within a full turn.
    """
    curr_pos = _pt(curr_pos)
    curr_step = _pt(curr_step)
    turning_direction = TurnDirection(turning_direction)
    sign = 1.0 if turning_direction is TurnDirection.LEFT else -1.0
    max_turns = int(2 * math.pi / abs(d_theta)) + 2

    def hits(point: np.ndarray) -> bool:
        return segment_hits_obstacles(obstacles, curr_pos, point)

    def turn(point: np.ndarray, angle: float) -> np.ndarray:
        return rotate(point - curr_pos, angle) + curr_pos

    sight = curr_pos + curr_step
    touch = curr_pos + rotate(curr_step, -sign * math.pi / 4)

    for _ in range(max_turns):
        if not hits(sight):
            break
        sight, touch = turn(sight, sign * d_theta), turn(touch, sign * d_theta)
    else:
        raise RuntimeError("no free direction around the current position")

    for _ in range(max_turns):
        if hits(sight) or hits(touch):
            break
        sight, touch = turn(sight, -sign * d_theta), turn(touch, -sign * d_theta)
    else:
        raise RuntimeError("no obstacle boundary near the current position")

    if not hits(sight) and hits(touch):
        return sight - curr_pos
    raise RuntimeError("could not find a boundary-following step")


def angle_between_vertices(v1, v2) -> float:
    """Angle of the edge v1 -> v2 in [0, 2*pi)."""
    v1, v2 = _pt(v1), _pt(v2)
    angle = math.atan2(v2[1] - v1[1], v2[0] - v1[0])
    if angle < -1e-10:
        angle += 2 * math.pi
    return angle


def index_bottom_left(vertices: Sequence[Iterable[float]]) -> int:
    """Index of the lowest vertex, leftmost among ties."""
    pts = [_pt(v) for v in vertices]
    min_x, min_y = pts[0]
    min_idx = 0
    for i, (x, y) in enumerate(pts[1:], start=1):
        if y - min_y < -1e-12:
            min_x, min_y, min_idx = x, y, i
        elif abs(y - min_y) < 1e-12 and x < min_x:
            min_x, min_idx = x, i
    return min_idx


def rearrange_vertices(vertices: Sequence[Iterable[float]]) -> list[np.ndarray]:
    """Cyclically reorder vertices so the bottom-left one comes first."""
    pts = [_pt(v).copy() for v in vertices]
    idx = index_bottom_left(pts)
    return pts[idx:] + pts[:idx]


def cspace_obstacle(robot_vertices: Sequence[Iterable[float]], obstacle: Polygon) -> Polygon:
    """C-space obstacle of a translating convex robot around a convex obstacle.

    Robot vertices are counter-clockwise and start with the reference point.
    """
    robot = [_pt(v) for v in robot_vertices]
    ref = robot[0]
    neg_robot = rearrange_vertices([-(v - ref) for v in robot])
    neg_robot.append(neg_robot[0])
    obs = obstacle.vertices_ccw()
    obs.append(obs[0])

    def edge_angle(pts: list[np.ndarray], i: int) -> float:
        if i + 1 >= len(pts):
            return math.inf
        return angle_between_vertices(pts[i], pts[i + 1])

    result: list[np.ndarray] = []
    j = k = 0
    target = len(neg_robot) + len(obs) - 2
    while len(result) < target and j < len(neg_robot) and k < len(obs):
        result.append(neg_robot[j] + obs[k])
        a_r, a_o = edge_angle(neg_robot, j), edge_angle(obs, k)
        if a_r < a_o:
            j += 1
        elif a_r > a_o:
            k += 1
        else:
            j += 1
            k += 1
        if j >= len(neg_robot) - 1 and k >= len(obs) - 1:
            break
    return Polygon(result)


def closest_point_on_obstacle(obstacle: Polygon, q) -> tuple[np.ndarray, float]:
    """Closest point on the obstacle boundary to q and its distance."""
    q = _pt(q)
    vertices = obstacle.vertices_ccw()
    closest = None
    min_dist = math.inf
    for a, b in zip(vertices, vertices[1:] + vertices[:1]):
        ab = b - a
        ab_ab = float(ab @ ab)
        t = float((q - a) @ ab) / ab_ab if ab_ab > 0 else 0.0
        t = max(0.0, min(1.0, t))
        candidate = a + t * ab
        dist = norm2(candidate - q)
        if dist < min_dist:
            min_dist, closest = dist, candidate
    return closest, min_dist


def potential_gradient(
    q, problem: Problem2D, d_star: float, zetta: float, q_star: float, eta: float
) -> np.ndarray:
    """Gradient of the attractive-plus-repulsive potential at q."""
    q = _pt(q)
    diff = q - problem.q_goal
    dist_goal = norm2(diff)
    if dist_goal <= d_star:
        grad = zetta * diff
    else:
        grad = d_star * zetta * diff / dist_goal
    for obs in problem.obstacles:
        c, d = closest_point_on_obstacle(obs, q)
        if d <= q_star:
            grad = grad + eta * (1.0 / q_star - 1.0 / d) * (q - c) / d**3
    return grad


def correct_angle(angle: float) -> float:
    """Bring an angle into [0, 2*pi]."""
    two_pi = 2 * math.pi
    while angle > two_pi:
        angle -= two_pi
    while angle < 0:
        angle += two_pi
    return angle


def norm_with_angle_at_third_index(vec) -> float:
    """Norm of a state difference whose third entry is an angle."""
    v = _pt(vec).copy()
    if v.size > 2 and abs(v[2]) > math.pi:
        v[2] = 2 * math.pi - v[2]
    return float(np.linalg.norm(v))