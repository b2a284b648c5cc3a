"""A* search over weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from motionplan.graph import Graph

Heuristic = Callable[[int], float]


@dataclass
class ShortestPathProblem:
    """A graph with numeric edge weights and the start and goal nodes."""

    graph: Graph
    init_node: int
    goal_node: int


@dataclass
class GraphSearchResult:
    """Outcome of a graph search."""

    success: bool = False
    node_path: list[int] = field(default_factory=list)
    path_cost: float = 0.0


@dataclass
class LookupHeuristic:
    """Heuristic read from a table; nodes not in the table get 0."""

    values: dict[int, float] = field(default_factory=dict)

    def __call__(self, node: int) -> float:
        return float(self.values.get(node, 0.0))


def zero_heuristic(node: int) -> float:
    """Heuristic that is zero everywhere, turning A* into Dijkstra's algorithm.

    Raises ValueError for a negative node index, since nodes are indices.
    """
    if node < 0:
        raise ValueError(f"node index must be non-negative, got {node}")
    return 0.0


@dataclass
class _Entry:
    priority: float
    cost: float
    parent: int


class AStar:
    """A* graph search with a bounded number of expansions."""

    max_iterations = 1_000_000

    def search(
        self, problem: ShortestPathProblem, heuristic: Heuristic = zero_heuristic
    ) -> GraphSearchResult:
        """Find a cheapest path from the init node to the goal node."""
        graph = problem.graph
        init, goal = problem.init_node, problem.goal_node

        open_list: dict[int, _Entry] = {init: _Entry(heuristic(init), 0.0, init)}
        closed: dict[int, _Entry] = {}
        found = False
        iterations = 0

        while open_list and iterations < self.max_iterations:
            best = min(open_list, key=lambda n: open_list[n].priority)
            entry = open_list.pop(best)
            closed[best] = entry
            if best == goal:
                found = True
                break

            if best < len(graph):
                neighbours = zip(graph.children(best), graph.outgoing_edges(best))
            else:
                neighbours = iter(())
            for child, weight in neighbours:
                if child in closed:
                    continue
                cost = entry.cost + weight
                existing = open_list.get(child)
                if existing is None:
                    open_list[child] = _Entry(cost + heuristic(child), cost, best)
                elif existing.cost > cost:
                    existing.priority = cost + heuristic(child)
                    existing.cost = cost
                    existing.parent = best
            iterations += 1

        if not found:
            return GraphSearchResult()

        path = [goal]
        node = goal
        while node != init:
            node = closed[node].parent
            path.append(node)
        path.reverse()
        return GraphSearchResult(True, path, closed[goal].cost)