"""
Ford-Fulkerson max flow with an optional capacity scaling phase.

The solver works directly on the capacities stored in a SimpleGraph: an edge's
capacity is how much more can be pushed along it. Pushing flow lowers the
edge's capacity and raises the capacity of its reverse edge, which is created
on demand with a capacity of zero. The graph is modified in place, so a graph
should be handed to one solver only.
"""

import logging

from .config import DEFAULT_ALGORITHM, DEFAULT_SINK, DEFAULT_SOURCE, DEFAULT_TRAVERSAL
from .errors import ConfigurationError, MalformedPathError
from .search import Traversal, find_augmenting_path

logger = logging.getLogger(__name__)

# Threshold of the unscaled search: any edge with capacity left qualifies
BASE_THRESHOLD = 0


def initial_threshold(max_out):
    """
    Largest power of two that is <= max_out, and never less than 1.
    """
    delta = 1
    while delta * 2 <= max_out:
        delta *= 2
    return delta


def _describe(path):
    return " -> ".join([path[0].first.name] + [e.second.name for e in path])


class FordFulkerson:
    def __init__(self, graph, traversal=DEFAULT_TRAVERSAL, source=DEFAULT_SOURCE, sink=DEFAULT_SINK):
        self.graph = graph
        try:
            self.traversal = Traversal(traversal)
        except ValueError:
            raise ConfigurationError(f"Unknown traversal '{traversal}'") from None
        self.s = graph.find_vertex(source, role="source")
        self.t = graph.find_vertex(sink, role="sink")
        if self.s is self.t:
            raise ConfigurationError("Source and sink must be different vertices")
        self.flow = 0

    def augmenting_path(self, delta):
        return find_augmenting_path(self.graph, self.s, self.t, delta, self.traversal)

    def residual_of(self, e):
        """
        Return the edge running opposite to 'e', inserting one with zero
        capacity if the graph doesn't have it yet.
        """
        r = self.graph.find_edge(e.second, e.first)
        if r is None:
            r = self.graph.insert_edge(e.second, e.first, 0, residual=True)
        return r

    def increase_flow(self, e, amount):
        e.capacity -= amount
        r = self.residual_of(e)
        r.capacity += amount

    def _check_path(self, path):
        if not path:
            raise MalformedPathError("Cannot augment along an empty path")
        if path[0].first is not self.s:
            raise MalformedPathError(f"Path starts at '{path[0].first.name}', not at the source")
        if path[-1].second is not self.t:
            raise MalformedPathError(f"Path ends at '{path[-1].second.name}', not at the sink")
        for e, f in zip(path, path[1:]):
            if e.second is not f.first:
                raise MalformedPathError(
                    f"Path is broken between ({e.first.name}->{e.second.name}) "
                    f"and ({f.first.name}->{f.second.name})"
                )
        # A simple path: pushing twice over one edge could leave it negative
        seen = {self.s}
        for e in path:
            if e.second in seen:
                raise MalformedPathError(f"Path visits '{e.second.name}' more than once")
            seen.add(e.second)

    def augment(self, path):
        """
        Push the bottleneck capacity of 'path' (a list of edges from s to t)
        along every edge of it and add it to the running flow total.
        """
        self._check_path(path)
        bottleneck = min(e.capacity for e in path)

        for e in path:
            self.increase_flow(e, bottleneck)

        self.flow += bottleneck
        logger.debug("Augmented %s by %s (flow now %s)", _describe(path), bottleneck, self.flow)

    def _saturate(self, delta):
        # Augment at this threshold until no path is left; returns the number of augmentations
        count = 0
        path = self.augmenting_path(delta)

        while path is not None:
            self.augment(path)
            count += 1
            path = self.augmenting_path(delta)

        return count

    def max_flow(self):
        """
        Standard Ford-Fulkerson: augment along any path with capacity left
        until there is none. Returns the max flow value.
        """
        count = self._saturate(BASE_THRESHOLD)
        logger.info("Max flow %s after %d augmentations", self.flow, count)
        return self.flow

    def scaling_max_flow(self):
        """
        Capacity scaling Ford-Fulkerson. Starts with a threshold of the largest
        power of two not above the biggest capacity out of the source and
        halves it after each phase. A last phase with no threshold collects
        any fractional capacity the integer thresholds skipped.
        """
        max_out = max((e.capacity for e in self.graph.out_edges(self.s)), default=0)
        delta = initial_threshold(max_out)
        count = 0

        while delta >= 1:
            logger.debug("Scaling phase with threshold %s", delta)
            count += self._saturate(delta)
            delta //= 2

        count += self._saturate(BASE_THRESHOLD)
        logger.info("Max flow %s after %d augmentations (scaling)", self.flow, count)
        return self.flow


def solve(graph, algorithm=DEFAULT_ALGORITHM, traversal=DEFAULT_TRAVERSAL, source=DEFAULT_SOURCE, sink=DEFAULT_SINK):
    """
    Build a solver for 'graph' and run the named algorithm on it. Returns the
    solver so callers can look at the graph and the flow afterwards.
    """
    solver = FordFulkerson(graph, traversal=traversal, source=source, sink=sink)
    if algorithm == "scaling":
        solver.scaling_max_flow()
    elif algorithm == "standard":
        solver.max_flow()
    else:
        raise ConfigurationError(f"Unknown algorithm '{algorithm}'")
    return solver
