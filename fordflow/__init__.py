"""
Ford-Fulkerson maximum flow with capacity scaling.
"""

from .errors import (
    AmbiguousEndpointError,
    ConfigurationError,
    FlowError,
    MalformedCapacityError,
    MalformedPathError,
    MissingEndpointError,
)
from .graph import Edge, SimpleGraph, Vertex, edge_flows
from .loaders import graph_from_dict, graph_from_matrix, graph_from_networkx, read_edge_list, to_networkx
from .search import Traversal, find_augmenting_path
from .solver import FordFulkerson, initial_threshold, solve

__version__ = "0.1.0"
