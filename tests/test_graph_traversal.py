import pytest

from algoshelf.graph_traversal import Graph, strongly_connected_components


def _directed_example():
    graph = Graph(4)
    for source, target in [(0, 3), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(source, target)
    return graph


def _prepend_example():
    graph = Graph(6)
    for u, v in [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]:
        graph.add_undirected_edge(u, v, prepend=True)
    return graph


def test_bfs_directed_example():
    assert _directed_example().bfs(2) == [2, 0, 3]


def test_bfs_trace_of_prepended_graph():
    graph = _prepend_example()
    trace = graph.bfs_trace(0)
    assert trace == [((0,), 0), ((2, 1), 2), ((1, 4), 1), ((4, 3), 4), ((3,), 3)]
    assert [vertex for _, vertex in trace] == graph.bfs(0)


def test_prepend_and_append_order():
    front = Graph(3)
    front.add_undirected_edge(0, 1, prepend=True)
    front.add_undirected_edge(0, 2, prepend=True)
    back = Graph(3)
    back.add_undirected_edge(0, 1)
    back.add_undirected_edge(0, 2)
    assert front.neighbours(0) == [2, 1]
    assert back.neighbours(0) == [1, 2]


def test_undirected_edge_recorded_both_ways():
    graph = Graph(2)
    graph.add_undirected_edge(0, 1)
    assert graph.neighbours(0) == [1]
    assert graph.neighbours(1) == [0]


def test_dfs_goes_deep_first():
    graph = Graph(4)
    graph.add_undirected_edge(0, 1)
    graph.add_undirected_edge(1, 2)
    graph.add_undirected_edge(0, 3)
    assert graph.dfs(0) == [0, 1, 2, 3]


@pytest.mark.parametrize("start", range(6))
def test_dfs_and_bfs_reach_same_vertices(start):
    graph = _prepend_example()
    depth = graph.dfs(start)
    breadth = graph.bfs(start)
    assert depth[0] == start
    assert len(depth) == len(set(depth))
    assert set(depth) == set(breadth)


def test_dfs_each_vertex_adjacent_to_earlier_one():
    graph = _prepend_example()
    order = graph.dfs(3)
    for position, vertex in enumerate(order[1:], start=1):
        assert any(vertex in graph.neighbours(prior) for prior in order[:position])


def test_isolated_vertex_reaches_only_itself():
    graph = _prepend_example()
    assert graph.bfs(5) == [5]
    assert graph.dfs(5) == [5]


def test_long_path_does_not_overflow():
    size = 5000
    graph = Graph(size)
    for vertex in range(size - 1):
        graph.add_edge(vertex, vertex + 1)
    assert graph.dfs(0) == list(range(size))


def test_out_of_range_vertex_raises():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.bfs(-1)


def test_negative_vertex_count_raises():
    with pytest.raises(ValueError):
        Graph(-1)


def test_scc_worked_example():
    one_based = [(1, 2), (2, 1), (3, 2), (3, 7), (7, 6), (6, 3), (6, 5), (2, 5), (5, 4), (1, 4)]
    edges = [(a - 1, b - 1) for a, b in one_based]
    assert strongly_connected_components(7, edges) == [[6, 5, 2], [1, 0], [4], [3]]


def test_scc_cycle_is_one_component():
    components = strongly_connected_components(3, [(0, 1), (1, 2), (2, 0)])
    assert len(components) == 1
    assert sorted(components[0]) == [0, 1, 2]


def test_scc_partitions_vertices_of_dag():
    edges = [(0, 1), (1, 2), (0, 2), (3, 2)]
    components = strongly_connected_components(4, edges)
    assert len(components) == 4
    assert sorted(v for component in components for v in component) == [0, 1, 2, 3]