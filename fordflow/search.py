"""
Augmenting path search over the residual graph. Only edges leaving the
current vertex with a remaining capacity of at least 'delta' are explored.
The frontier is either a stack (depth first, the default) or a queue
(breadth first); both find a path whenever one exists, they only differ in
which one.
"""

from collections import deque
from enum import Enum


class Traversal(Enum):
    STACK = "stack"
    QUEUE = "queue"


def _eligible(edge, vertex, delta):
    return edge.first is vertex and edge.capacity > 0 and edge.capacity >= delta


def find_augmenting_path(graph, s, t, delta, traversal=Traversal.STACK):
    """
    Search from 's' for 't' using edges with capacity >= delta. Returns the
    path as a list of edges ordered from s to t, or None if t can't be
    reached at this threshold.
    """
    traversal = Traversal(traversal)
    # vertex -> edge it was reached by
    visited = {s: None}
    frontier = deque(e for e in graph.incident_edges(s) if _eligible(e, s, delta))
    take = frontier.pop if traversal is Traversal.STACK else frontier.popleft

    while t not in visited and frontier:
        e = take()
        v = e.second

        if v in visited:
            continue

        visited[v] = e

        for f in graph.incident_edges(v):
            if _eligible(f, v, delta) and f.second not in visited:
                frontier.append(f)

    if t not in visited:
        return None

    path = []
    v = t

    while v is not s:
        e = visited[v]
        path.append(e)
        v = e.first

    path.reverse()
    return path
