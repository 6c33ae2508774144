import io

import pytest

from overture.graph import Graph, GraphDir


def _sample():
    graph = Graph(1, 0, "source", "sink")
    graph.connect(graph.insert("source"), graph.insert("mid"))
    graph.connect(graph.insert("mid"), graph.insert("mid"))
    graph.connect(graph.insert("mid"), graph.insert("sink"))
    return graph


def test_structure():
    graph = _sample()
    mid = graph.find("mid")
    assert mid is not None
    assert graph.source.first_edge(GraphDir.BACKWARD) is None
    assert graph.sink.first_edge(GraphDir.FORWARD) is None
    assert graph.source.outs.next_edge(GraphDir.FORWARD) is None
    assert graph.source.outs.endpoint(GraphDir.FORWARD) is mid
    assert graph.sink.ins.next_edge(GraphDir.BACKWARD) is None
    assert graph.sink.ins.endpoint(GraphDir.BACKWARD) is mid
    for edge in mid.edges(GraphDir.BACKWARD):
        assert edge.from_node is mid or edge.from_node is graph.source_for(GraphDir.FORWARD)
    for edge in mid.edges(GraphDir.FORWARD):
        assert edge.to_node is mid or edge.to_node is graph.sink_for(GraphDir.FORWARD)


def test_post_order():
    graph = _sample()
    mid = graph.find("mid")
    order = graph.compute_post_order(GraphDir.BACKWARD.reverse())
    assert order == [graph.sink, mid, graph.source]


def test_depth_first_order():
    graph = _sample()
    mid = graph.find("mid")
    order = graph.compute_depth_first_order(GraphDir.FORWARD)
    assert order == [graph.source, mid, graph.sink]


def test_backward_traversal_starts_at_sink():
    graph = _sample()
    mid = graph.find("mid")
    assert graph.compute_depth_first_order(GraphDir.BACKWARD) == [graph.sink, mid, graph.source]


def test_write_dot():
    graph = _sample()
    out = io.StringIO()
    graph.write_dot(out)
    assert out.getvalue() == (
        "digraph {\n"
        "    source -> 2\n"
        "    2 -> 2\n"
        "    2 -> sink\n"
        "}\n"
    )


def test_dump(capsys):
    graph = Graph()
    graph.connect(graph.source, graph.sink)
    graph.dump()
    assert capsys.readouterr().out == "digraph {\n    source -> sink\n}\n"


def test_insert_and_connect_are_idempotent():
    graph = Graph(2, 3)
    a = graph.insert("a")
    assert graph.insert("a") is a
    assert a.index == 2
    assert graph.insert("b").index == 3
    assert graph.node_count == 4
    assert a.user_data == [None, None]
    edge = graph.connect(a, graph.insert("b"))
    assert graph.connect(a, graph.find("b")) is edge
    assert edge.user_data == [None, None, None]
    assert graph.edge_count == 1


def test_keyless_source_not_findable():
    graph = Graph()
    assert graph.find(None) is None


def test_disconnect():
    graph = _sample()
    mid = graph.find("mid")
    assert graph.disconnect(mid, mid) is True
    assert graph.disconnect(mid, mid) is False
    assert [e.to_node for e in mid.edges(GraphDir.FORWARD)] == [graph.sink]
    assert [e.from_node for e in mid.edges(GraphDir.BACKWARD)] == [graph.source]
    assert graph.edge_count == 2


def test_same_source_and_sink_key_rejected():
    with pytest.raises(ValueError):
        Graph(0, 0, "k", "k")


def test_invalid_connections_rejected():
    graph = Graph()
    node = graph.insert("n")
    with pytest.raises(ValueError):
        graph.connect(graph.sink, node)
    with pytest.raises(ValueError):
        graph.connect(node, graph.source)


def test_dir_reverse():
    assert GraphDir.FORWARD.reverse() is GraphDir.BACKWARD
    assert GraphDir.BACKWARD.reverse() is GraphDir.FORWARD