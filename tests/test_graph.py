import pytest

from fordflow.errors import AmbiguousEndpointError, MalformedCapacityError, MissingEndpointError
from fordflow.graph import SimpleGraph, edge_flows


def test_insert_edge_lists_edge_on_both_endpoints():
    g = SimpleGraph()
    s, t = g.insert_vertex("s"), g.insert_vertex("t")
    e = g.insert_edge(s, t, 5, data="payload")

    assert s.incident_edges == [e]
    assert t.incident_edges == [e]
    assert list(g.out_edges(s)) == [e]
    assert list(g.out_edges(t)) == []
    assert e.capacity == e.initial_capacity == 5
    assert e.data == "payload"
    assert not e.residual
    assert e.opposite(s) is t


@pytest.mark.parametrize("cap", [-1, -0.5, float("nan"), float("inf"), "3", None, True])
def test_insert_edge_rejects_bad_capacity(cap):
    g = SimpleGraph()
    s, t = g.insert_vertex("s"), g.insert_vertex("t")
    with pytest.raises(MalformedCapacityError):
        g.insert_edge(s, t, cap)
    assert g.number_of_edges() == 0
    assert s.incident_edges == []


@pytest.mark.parametrize("cap", [0, 0.0, 7, 2.5])
def test_insert_edge_accepts_non_negative_numbers(cap):
    g = SimpleGraph()
    s, t = g.insert_vertex("s"), g.insert_vertex("t")
    assert g.insert_edge(s, t, cap).capacity == cap


def test_find_edge_uses_direction_and_first_inserted():
    g = SimpleGraph()
    a, b = g.insert_vertex("a"), g.insert_vertex("b")
    first = g.insert_edge(a, b, 1)
    g.insert_edge(a, b, 2)

    assert g.find_edge(a, b) is first
    assert g.find_edge(b, a) is None


def test_self_loop_is_listed_once():
    g = SimpleGraph()
    a = g.insert_vertex("a")
    g.insert_edge(a, a, 1)
    assert len(a.incident_edges) == 1


def test_find_vertex():
    g = SimpleGraph()
    s = g.insert_vertex("s")
    g.insert_vertex("x")
    g.insert_vertex("x")

    assert g.find_vertex("s") is s
    with pytest.raises(MissingEndpointError) as err:
        g.find_vertex("t", role="sink")
    assert err.value.role == "sink"
    assert "'t'" in str(err.value)
    with pytest.raises(AmbiguousEndpointError) as err:
        g.find_vertex("x")
    assert err.value.count == 2


def test_edge_flows_skips_residual_edges_and_clamps():
    g = SimpleGraph()
    s, t = g.insert_vertex("s"), g.insert_vertex("t")
    e = g.insert_edge(s, t, 5)
    back = g.insert_edge(t, s, 0, residual=True)
    e.capacity, back.capacity = 2, 3

    assert edge_flows(g) == [(e, 3)]

    e.capacity = 9
    assert edge_flows(g) == [(e, 0)]
