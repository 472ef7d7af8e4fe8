"""
Solver defaults and option handling. Options can come from the JSON payload
(keys 'algorithm', 'traversal', 'source', 'sink') and from command line
overrides; overrides win.
"""

from .errors import ConfigurationError

DEFAULT_SOURCE = "s"
DEFAULT_SINK = "t"
DEFAULT_ALGORITHM = "standard"
DEFAULT_TRAVERSAL = "stack"

ALGORITHMS = ("standard", "scaling")
TRAVERSALS = ("stack", "queue")

# Flows below this are reported as zero
TOLERANCE = 1e-9

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_options(data, overrides=None):
    """
    Merge solver options from a payload dict with non-None overrides and
    validate them. Returns a plain dict with every option set.
    """
    options = {
        'algorithm': data.get('algorithm', DEFAULT_ALGORITHM),
        'traversal': data.get('traversal', DEFAULT_TRAVERSAL),
        'source': data.get('source', DEFAULT_SOURCE),
        'sink': data.get('sink', DEFAULT_SINK),
    }

    for key, value in (overrides or {}).items():
        if value is not None:
            options[key] = value

    if options['algorithm'] not in ALGORITHMS:
        raise ConfigurationError(
            f"Unknown algorithm '{options['algorithm']}', expected one of {', '.join(ALGORITHMS)}"
        )
    if options['traversal'] not in TRAVERSALS:
        raise ConfigurationError(
            f"Unknown traversal '{options['traversal']}', expected one of {', '.join(TRAVERSALS)}"
        )
    for key in ('source', 'sink'):
        if not isinstance(options[key], str) or not options[key]:
            raise ConfigurationError(f"'{key}' must be a non-empty vertex name")

    return options
