"""
Exceptions raised by the solver, the graph model and the loaders.
Everything derives from FlowError so callers can catch the whole family.
"""


class FlowError(ValueError):
    pass


class MissingEndpointError(FlowError):
    # No vertex carries the requested source/sink name
    def __init__(self, role, name):
        super().__init__(f"No vertex named '{name}' to use as the {role}")
        self.role = role
        self.name = name


class AmbiguousEndpointError(FlowError):
    # More than one vertex carries the requested source/sink name
    def __init__(self, role, name, count):
        super().__init__(f"{count} vertices are named '{name}', cannot pick the {role}")
        self.role = role
        self.name = name
        self.count = count


class MalformedCapacityError(FlowError):
    def __init__(self, first, second, capacity):
        super().__init__(f"Edge ({first}->{second}) has invalid capacity {capacity!r}")
        self.capacity = capacity


class MalformedPathError(FlowError):
    pass


class ConfigurationError(FlowError):
    pass
