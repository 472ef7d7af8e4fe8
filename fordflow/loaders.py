"""
Builders that turn outside data into a SimpleGraph (the JSON payload the CLI
reads, a networkx DiGraph, a capacity matrix or an edge list text file) and
an exporter back to networkx.
"""

import networkx as nx
import numpy as np

from .errors import FlowError, MalformedCapacityError
from .graph import SimpleGraph


def _vertex_for(graph, by_name, name):
    if name not in by_name:
        by_name[name] = graph.insert_vertex(name)
    return by_name[name]


def _check_name(name):
    # JSON names must be usable as dict keys and print back unchanged
    if isinstance(name, bool) or not isinstance(name, (str, int, float)):
        raise FlowError(f"Vertex name {name!r} must be a string or a number")
    return name


def graph_from_dict(data):
    """
    Build a graph from {"nodes": [...], "edges": [{"from", "to", "capacity"}]}.
    Vertices only mentioned by edges are added in the order they show up.
    """
    graph = SimpleGraph()
    by_name = {}

    nodes = data.get('nodes', [])
    edges = data.get('edges', [])
    if not isinstance(nodes, list) or not isinstance(edges, list):
        raise FlowError("'nodes' and 'edges' must be lists")

    for name in nodes:
        if _check_name(name) in by_name:
            raise FlowError(f"Vertex '{name}' is listed twice")
        _vertex_for(graph, by_name, name)

    for edge in edges:
        try:
            u, v = edge['from'], edge['to']
        except (KeyError, TypeError):
            raise FlowError(f"Edge {edge!r} needs 'from' and 'to'") from None
        _check_name(u)
        _check_name(v)
        cap = edge.get('capacity')
        if cap is None:
            raise MalformedCapacityError(u, v, cap)
        graph.insert_edge(_vertex_for(graph, by_name, u), _vertex_for(graph, by_name, v), cap)

    return graph


def graph_from_networkx(G, capacity='capacity'):
    """
    Copy a networkx DiGraph. Every edge must carry the 'capacity' attribute;
    node objects are turned into names with str() and kept as vertex data.
    Two nodes with the same str() are refused.
    """
    if not nx.is_directed(G):
        raise FlowError("A directed graph is required")

    graph = SimpleGraph()
    by_name = {}

    for n in G.nodes():
        if str(n) in by_name:
            raise FlowError(f"Nodes {by_name[str(n)].data!r} and {n!r} both map to vertex name '{n}'")
        by_name[str(n)] = graph.insert_vertex(str(n), data=n)

    for u, v, attrs in G.edges(data=True):
        if capacity not in attrs:
            raise MalformedCapacityError(u, v, None)
        graph.insert_edge(by_name[str(u)], by_name[str(v)], attrs[capacity])

    return graph


def graph_from_matrix(matrix, names=None):
    """
    Build a graph from a square capacity matrix: entry [i][j] > 0 becomes an
    edge i->j. Vertices are named by 'names' or by their index.
    """
    C = np.asarray(matrix)
    if C.ndim != 2 or C.shape[0] != C.shape[1]:
        raise FlowError(f"Capacity matrix must be square, got shape {C.shape}")
    if not np.issubdtype(C.dtype, np.number) or np.issubdtype(C.dtype, np.complexfloating):
        raise FlowError(f"Capacity matrix must be real valued, got {C.dtype}")

    n = C.shape[0]
    if names is None:
        names = [str(i) for i in range(n)]
    if len(names) != n:
        raise FlowError(f"Got {len(names)} names for {n} vertices")

    graph = SimpleGraph()
    vertices = [graph.insert_vertex(name) for name in names]

    for i in range(n):
        for j in range(n):
            cap = C[i, j].item()
            # Zero means "no edge"; negatives still reach insert_edge and get rejected
            if cap != 0:
                graph.insert_edge(vertices[i], vertices[j], cap)

    return graph


def _parse_capacity(text):
    try:
        return int(text)
    except ValueError:
        return float(text)


def read_edge_list(lines):
    """
    Parse 'first second capacity' lines (whitespace separated). Blank lines
    and anything after a '#' are ignored. 'lines' can be any iterable of
    strings, an open file included.
    """
    graph = SimpleGraph()
    by_name = {}

    for lineno, line in enumerate(lines, 1):
        line = line.split('#', 1)[0].strip()
        if not line:
            continue

        fields = line.split()
        if len(fields) != 3:
            raise FlowError(f"Line {lineno}: expected 'first second capacity', got {line!r}")

        u, v, cap = fields
        try:
            cap = _parse_capacity(cap)
        except ValueError:
            raise MalformedCapacityError(u, v, cap) from None
        graph.insert_edge(_vertex_for(graph, by_name, u), _vertex_for(graph, by_name, v), cap)

    return graph


def to_networkx(graph, residual=False):
    """
    Export to a networkx DiGraph with 'capacity' (what is left) and
    'initial_capacity' edge attributes. Solver-created reverse edges are left
    out unless 'residual' is set. Parallel edges are merged by adding up
    their capacities.
    """
    G = nx.DiGraph()
    G.add_nodes_from(v.name for v in graph.vertices)

    for e in graph.edges:
        if e.residual and not residual:
            continue
        u, v = e.first.name, e.second.name
        if G.has_edge(u, v):
            G[u][v]['capacity'] += e.capacity
            G[u][v]['initial_capacity'] += e.initial_capacity
        else:
            G.add_edge(u, v, capacity=e.capacity, initial_capacity=e.initial_capacity)

    return G
