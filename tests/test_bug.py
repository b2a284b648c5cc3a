import numpy as np

from motionplan.bug import Bug1, Bug2
from motionplan.environment import Polygon, Problem2D
from motionplan.geometry import TurnDirection, segment_hits_obstacles


def _free_problem():
    return Problem2D(
        x_min=0.0, x_max=5.0, y_min=0.0, y_max=5.0,
        q_init=(1.0, 1.0), q_goal=(2.0, 1.0),
    )


def _wall_problem(wall_x):
    square = Polygon([(wall_x, 4.5), (4.0, 4.5), (4.0, 5.5), (wall_x, 5.5)])
    return Problem2D(
        x_min=0.0, x_max=10.0, y_min=0.0, y_max=10.0,
        obstacles=[square], q_init=(2.0, 5.0), q_goal=(5.0, 5.01),
    )


def _step_lengths(points):
    return [float(np.linalg.norm(b - a)) for a, b in zip(points, points[1:])]


def _all_segments_free(points, obstacles):
    return all(
        not segment_hits_obstacles(obstacles, a, b) for a, b in zip(points, points[1:])
    )


def test_bug1_free_space_endpoints():
    problem = _free_problem()
    path = Bug1().plan(problem)
    assert np.allclose(path.waypoints[0], problem.q_init)
    assert np.allclose(path.waypoints[1], problem.q_init + np.array([0.0, 0.01]))
    assert np.allclose(path.waypoints[-1], problem.q_goal)


def test_bug1_free_space_steps_have_step_size():
    path = Bug1().plan(_free_problem())
    lengths = _step_lengths(path.waypoints[1:-1])
    assert lengths
    assert all(np.isclose(length, 0.01) for length in lengths)


def test_bug1_stops_at_first_point_within_tolerance():
    problem = _free_problem()
    path = Bug1().plan(problem)
    assert np.linalg.norm(path.waypoints[-2] - problem.q_goal) < 0.1
    assert np.linalg.norm(path.waypoints[-3] - problem.q_goal) >= 0.1


def test_bug2_free_space():
    problem = _free_problem()
    path = Bug2().plan(problem)
    assert np.allclose(path.waypoints[0], problem.q_init)
    assert np.allclose(path.waypoints[1], problem.q_init)
    assert np.allclose(path.waypoints[-1], problem.q_goal)
    lengths = _step_lengths(path.waypoints[1:-1])
    assert all(np.isclose(length, 0.003) for length in lengths[1:])
    assert np.linalg.norm(path.waypoints[-2] - problem.q_goal) < 0.1


def test_bug1_follows_wall_to_the_left():
    problem = _wall_problem(3.005)
    path = Bug1(max_iterations=400, max_boundary_steps=30).plan(problem)
    body = path.waypoints[:-1]
    assert np.allclose(path.waypoints[0], problem.q_init)
    assert np.allclose(path.waypoints[-1], problem.q_goal)
    assert _all_segments_free(body, problem.obstacles)
    assert all(p[0] < 3.005 for p in body)
    assert max(p[1] for p in body) > 5.15


def test_bug1_follows_wall_to_the_right():
    problem = _wall_problem(3.005)
    path = Bug1(
        turning_direction=TurnDirection.RIGHT, max_iterations=400, max_boundary_steps=30
    ).plan(problem)
    body = path.waypoints[:-1]
    assert _all_segments_free(body, problem.obstacles)
    assert all(p[0] < 3.005 for p in body)
    assert min(p[1] for p in body) < 4.87


def test_bug2_follows_wall_without_collision():
    problem = _wall_problem(3.0005)
    problem.q_goal = np.array([5.0, 5.0])
    path = Bug2(max_iterations=600, max_boundary_steps=30).plan(problem)
    body = path.waypoints[:-1]
    assert np.allclose(path.waypoints[-1], problem.q_goal)
    assert _all_segments_free(body, problem.obstacles)
    assert all(p[0] < 3.0005 for p in body)
    assert max(p[1] for p in body) > 5.05