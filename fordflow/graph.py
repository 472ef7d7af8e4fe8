"""
Directed graph with edge capacities. Each vertex keeps a single list of its
incident edges (leaving and arriving); an edge's direction is read off its
endpoints. Capacities are the *remaining* capacity of an edge and are mutated
in place by the solver.
"""

import math
import numbers

from .errors import AmbiguousEndpointError, MalformedCapacityError, MissingEndpointError


class Vertex:
    def __init__(self, name, data=None):
        self.name = name
        self.data = data
        self.incident_edges = []

    def __repr__(self):
        return f"Vertex({self.name!r})"


class Edge:
    def __init__(self, first, second, capacity, data=None, residual=False):
        self.first = first
        self.second = second
        self.capacity = capacity
        self.initial_capacity = capacity
        self.data = data
        # True for reverse edges the solver had to create
        self.residual = residual

    def opposite(self, vertex):
        return self.second if vertex is self.first else self.first

    def __repr__(self):
        return f"Edge({self.first.name!r} -> {self.second.name!r}, {self.capacity})"


def check_capacity(first, second, capacity):
    # bool is an Integral, but True/False is never what the caller meant
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Real):
        raise MalformedCapacityError(first, second, capacity)
    # NaN and infinity included, the scaling threshold needs a finite maximum
    if not math.isfinite(capacity) or capacity < 0:
        raise MalformedCapacityError(first, second, capacity)
    return capacity


class SimpleGraph:
    def __init__(self):
        self.vertices = []
        self.edges = []
        # (first, second) -> first edge inserted between them
        self._index = {}

    def __str__(self):
        return "\n".join(
            f"{v.name}: " + ", ".join(f"{e.second.name} ({e.capacity})"
                                      for e in v.incident_edges if e.first is v)
            for v in self.vertices
        )

    def insert_vertex(self, name, data=None):
        v = Vertex(name, data)
        self.vertices.append(v)
        return v

    def insert_edge(self, first, second, capacity, data=None, residual=False):
        """
        Add an edge first->second and return it. Negative, NaN and non-numeric
        capacities are rejected with MalformedCapacityError.
        """
        check_capacity(first.name, second.name, capacity)
        e = Edge(first, second, capacity, data, residual)
        first.incident_edges.append(e)
        if second is not first:
            second.incident_edges.append(e)
        self.edges.append(e)
        self._index.setdefault((first, second), e)
        return e

    def incident_edges(self, vertex):
        return iter(vertex.incident_edges)

    def out_edges(self, vertex):
        return (e for e in vertex.incident_edges if e.first is vertex)

    def find_edge(self, first, second):
        # Same edge a scan of first's incident list would hit first
        return self._index.get((first, second))

    def vertices_named(self, name):
        return [v for v in self.vertices if v.name == name]

    def find_vertex(self, name, role="vertex"):
        """
        Return the only vertex called 'name'. Raises MissingEndpointError when
        there is none and AmbiguousEndpointError when there are several.
        """
        matches = self.vertices_named(name)
        if not matches:
            raise MissingEndpointError(role, name)
        if len(matches) > 1:
            raise AmbiguousEndpointError(role, name, len(matches))
        return matches[0]

    def number_of_vertices(self):
        return len(self.vertices)

    def number_of_edges(self):
        return len(self.edges)


def edge_flows(graph):
    """
    Produce (edge, flow) pairs for every edge that was not created by the
    solver. The flow is the capacity the edge has given up; an input edge whose
    antiparallel twin served as its residual can go below its initial
    capacity, so the net flow is clamped at zero.
    """
    return [(e, max(e.initial_capacity - e.capacity, 0)) for e in graph.edges if not e.residual]
