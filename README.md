# motionplan

Planning tools for point robots in a planar workspace with polygonal
obstacles, built on numpy.

## Modules

- `motionplan.environment`: `Polygon` (vertices kept counter-clockwise,
  with `vertices_ccw()` and `vertices_cw()`), `Environment2D`, `Problem2D`
  (adds `q_init` and `q_goal`) and `Path2D` (with `length()`).
  `unwrap_waypoints` and `unwrap_path` shift waypoints by whole periods so
  that consecutive points of a path through wrapping coordinates stay close;
  both return new objects and log a warning for any value outside its bounds.
- `motionplan.geometry`: `orientation` and `on_segment`,
  `segment_hits_obstacles` and `count_intersections` against obstacle edges,
  `is_point_in_collision` (ray cast from the left workspace edge),
  `crosses_m_line`, `rotate`, `boundary_following_step`, the
  configuration-space obstacle of a translating convex robot
  (`cspace_obstacle`, with `angle_between_vertices`, `index_bottom_left`,
  `rearrange_vertices`), `closest_point_on_obstacle`, `potential_gradient`,
  `correct_angle`, `norm2`, `sum_elements` and
  `norm_with_angle_at_third_index`. `Orientation` and `TurnDirection` are
  enums used by these functions.
- `motionplan.graph`: `Graph`, a directed multigraph over integer nodes.
  With `reversible=True` (the default) it also keeps incoming links, giving
  `parents`, `incoming_edges` and `reverse`. `disconnect` removes every edge
  between two nodes, or only those equal to a given edge. `format` returns a
  text listing of the connections.
- `motionplan.astar`: `AStar.search` over a `ShortestPathProblem`, returning
  a `GraphSearchResult` (`success`, `node_path`, `path_cost`). Heuristics are
  callables of a node: `LookupHeuristic` reads a table (missing nodes give 0),
  `zero_heuristic` turns the search into Dijkstra's algorithm.
- `motionplan.bug`: `Bug1` and `Bug2` boundary-following planners. The
  workspace rectangle is treated as an extra obstacle. Step size, turning
  direction, tolerances and iteration limits are dataclass fields.
- `motionplan.gradient`: `GradientDescentPlanner(d_star, zetta, q_star, eta,
  rng=None)` descends the attractive/repulsive field and makes a small random
  step when the gradient vanishes; `AttractiveRepulsivePotential` exposes the
  same field through `gradient(q)`.
- `motionplan.multiagent`: `CircularAgentProperties`, `MultiAgentProblem2D`,
  `MultiAgentPath2D`, and `CentralPlanner` / `DecentralPlanner`, which both
  give each agent a straight path from its start to its goal.

## Examples

Graph search:

```python
from motionplan.graph import Graph
from motionplan.astar import AStar, ShortestPathProblem, zero_heuristic

g = Graph(reversible=False)
g.connect(0, 1, 1.0)
g.connect(1, 2, 2.0)
g.connect(0, 2, 5.0)
result = AStar().search(ShortestPathProblem(g, 0, 2), zero_heuristic)
print(result.node_path, result.path_cost)   # [0, 1, 2] 3.0
```

Gradient descent among obstacles:

```python
import random
from motionplan.environment import Polygon, Problem2D
from motionplan.gradient import GradientDescentPlanner

box = Polygon([(4, 4), (6, 4), (6, 6), (4, 6)])
problem = Problem2D(x_min=0, x_max=10, y_min=0, y_max=10, obstacles=[box],
                    q_init=(1.0, 1.0), q_goal=(9.0, 2.0))
planner = GradientDescentPlanner(0.5, 1.0, 1.0, 1.0, rng=random.Random(0))
path = planner.plan(problem)
print(len(path.waypoints), path.length())
```

## What is not included

The package works with continuous workspaces and graphs only. It has no
grid configuration spaces, no link-manipulator kinematics, no wavefront
planner, no sampling-based planners (roadmaps or trees), no planners for
agents with dynamics, and no collision-aware multi-agent planning. It draws
no figures and has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```