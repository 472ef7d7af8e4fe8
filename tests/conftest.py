import random

import pytest

from fordflow.graph import SimpleGraph


def build(edges, nodes=()):
    """
    Build a SimpleGraph from (first, second, capacity) tuples. 'nodes' fixes
    the order of vertices that should exist up front.
    """
    g = SimpleGraph()
    by_name = {}

    def vertex(name):
        if name not in by_name:
            by_name[name] = g.insert_vertex(name)
        return by_name[name]

    for name in nodes:
        vertex(name)
    for u, v, cap in edges:
        g.insert_edge(vertex(u), vertex(v), cap)
    return g


def random_edges(seed, n_inner=6, p=0.4, max_cap=20):
    # Random capacitated digraph on s, v0..v{n-1}, t without self loops or duplicate pairs
    rng = random.Random(seed)
    names = ["s"] + [f"v{i}" for i in range(n_inner)] + ["t"]
    edges = []
    for u in names:
        for v in names:
            if u == v or u == "t" or v == "s":
                continue
            if rng.random() < p:
                edges.append((u, v, rng.randint(0, max_cap)))
    return names, edges


def consumed(e):
    return e.initial_capacity - e.capacity


def conservation_violations(graph, s, t):
    bad = []
    for v in graph.vertices:
        if v is s or v is t:
            continue
        inflow = sum(consumed(e) for e in v.incident_edges if e.second is v)
        outflow = sum(consumed(e) for e in v.incident_edges if e.first is v)
        if inflow != outflow:
            bad.append((v.name, inflow, outflow))
    return bad


# Scenario A
DIAMOND = [("s", "a", 10), ("s", "b", 10), ("a", "t", 10), ("b", "t", 10), ("a", "b", 1)]

# CLRS figure 26.1, max flow 23
CLRS = [
    ("s", "v1", 16), ("s", "v2", 13), ("v1", "v3", 12), ("v2", "v1", 4), ("v2", "v4", 14),
    ("v3", "v2", 9), ("v3", "t", 20), ("v4", "v3", 7), ("v4", "t", 4),
]


@pytest.fixture
def diamond():
    return build(DIAMOND, nodes=("s", "a", "b", "t"))


@pytest.fixture
def clrs():
    return build(CLRS)


@pytest.fixture(params=["stack", "queue"])
def traversal(request):
    return request.param
