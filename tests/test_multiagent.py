import numpy as np
import pytest

from motionplan.multiagent import (
    CentralPlanner,
    CircularAgentProperties,
    DecentralPlanner,
    MultiAgentPath2D,
    MultiAgentProblem2D,
)


def _problem():
    agents = [
        CircularAgentProperties(0.5, (1.0, 1.0), (9.0, 9.0)),
        CircularAgentProperties(0.3, (1.0, 9.0), (9.0, 1.0)),
        CircularAgentProperties(0.4, (5.0, 0.5), (5.0, 9.5)),
    ]
    return MultiAgentProblem2D(
        x_min=0.0, x_max=10.0, y_min=0.0, y_max=10.0, agent_properties=agents
    )


@pytest.mark.parametrize("planner_cls", [CentralPlanner, DecentralPlanner])
def test_one_straight_path_per_agent(planner_cls):
    problem = _problem()
    result = planner_cls().plan(problem)
    assert result.num_agents == problem.num_agents
    for agent, path in zip(problem.agent_properties, result.agent_paths):
        assert len(path.waypoints) == 2
        np.testing.assert_allclose(path.waypoints[0], agent.q_init)
        np.testing.assert_allclose(path.waypoints[1], agent.q_goal)
        assert path.length() == pytest.approx(np.linalg.norm(agent.q_goal - agent.q_init))


@pytest.mark.parametrize("planner_cls", [CentralPlanner, DecentralPlanner])
def test_no_agents_gives_no_paths(planner_cls):
    result = planner_cls().plan(MultiAgentProblem2D())
    assert result.agent_paths == []


def test_paths_do_not_alias_problem_points():
    problem = _problem()
    result = CentralPlanner().plan(problem)
    result.agent_paths[0].waypoints[0][0] = 100.0
    assert problem.agent_properties[0].q_init[0] == 1.0


def test_agent_points_are_arrays():
    agent = CircularAgentProperties(0.5, [2, 3], [4, 5])
    assert agent.q_init.dtype == float
    np.testing.assert_allclose(agent.q_goal, [4.0, 5.0])
    assert MultiAgentPath2D().num_agents == 0