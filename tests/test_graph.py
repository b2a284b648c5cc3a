import pytest

from motionplan.graph import Graph


def _example_graph(reversible=True):
    graph = Graph(reversible)
    graph.connect(0, 1, "aliens")
    graph.connect(1, 2, "are")
    graph.connect(1, 0, "not")
    graph.connect(1, 6, "real,")
    graph.connect(6, 2, "do")
    graph.connect(6, 2, "you")
    graph.connect(6, 1, "believe me")
    return graph


def test_size_grows_to_largest_node():
    assert len(_example_graph()) == 7


def test_nodes_lists_connected_only():
    assert _example_graph().nodes() == [0, 1, 2, 6]


def test_children_and_edges_are_aligned():
    graph = _example_graph()
    assert graph.children(1) == [2, 0, 6]
    assert graph.outgoing_edges(1) == ["are", "not", "real,"]


def test_parents_and_incoming_edges():
    graph = _example_graph()
    assert graph.parents(2) == [1, 6, 6]
    assert graph.incoming_edges(2) == ["are", "do", "you"]


def test_disconnect_all_edges_between_nodes():
    graph = _example_graph()
    assert graph.disconnect(1, 0) is True
    assert graph.children(1) == [2, 6]
    assert graph.parents(0) == []


def test_disconnect_specific_edge():
    graph = _example_graph()
    assert graph.disconnect(6, 2, "do") is True
    assert graph.outgoing_edges(6) == ["you", "believe me"]
    assert graph.incoming_edges(2) == ["are", "you"]


def test_disconnect_missing_returns_false():
    graph = _example_graph()
    assert graph.disconnect(0, 2) is False
    assert graph.disconnect(6, 2, "nope") is False
    assert graph.children(6) == [2, 2, 1]


def test_disconnect_out_of_range_raises():
    with pytest.raises(IndexError):
        _example_graph().disconnect(0, 40)


def test_non_reversible_rejects_parents_and_reverse():
    graph = _example_graph(reversible=False)
    with pytest.raises(TypeError):
        graph.parents(2)
    with pytest.raises(TypeError):
        graph.incoming_edges(2)
    with pytest.raises(TypeError):
        graph.reverse()


def test_non_reversible_nodes_only_with_outgoing():
    graph = _example_graph(reversible=False)
    assert graph.nodes() == [0, 1, 6]


def test_reverse_swaps_directions():
    graph = _example_graph()
    before_children = graph.children(1)
    before_parents = graph.parents(1)
    graph.reverse()
    assert graph.children(1) == before_parents
    assert graph.parents(1) == before_children


def test_clear_empties_graph():
    graph = _example_graph()
    graph.clear()
    assert len(graph) == 0
    assert graph.nodes() == []


def test_format_lists_connections():
    text = _example_graph().format("Example")
    lines = text.splitlines()
    assert lines[0] == "Example:"
    assert "Node 1 is connected to:" in lines
    assert "    - child node 6 with edge: real," in lines
    assert sum(1 for line in lines if line.startswith("Node ")) == 3


def test_negative_node_rejected():
    with pytest.raises(ValueError):
        Graph().connect(-1, 2, 1.0)