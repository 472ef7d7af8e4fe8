"""
Command line front end. Reads a graph as JSON (from a file or stdin), runs
the requested max flow algorithm and prints the result as JSON on stdout.

Input:
{
  "nodes": ["s", "a", "t"],
  "edges": [{"from": "s", "to": "a", "capacity": 10}, ...],
  "algorithm": "standard" | "scaling",
  "traversal": "stack" | "queue",
  "source": "s",
  "sink": "t"
}
Everything but "edges" is optional.
"""

import argparse
import json
import logging
import sys

from .config import ALGORITHMS, LOG_FORMAT, TOLERANCE, TRAVERSALS, resolve_options
from .errors import FlowError
from .graph import edge_flows
from .loaders import graph_from_dict
from .solver import solve

logger = logging.getLogger("fordflow")


def _clean(value):
    # Show integral floats as ints so 20.0 prints as 20
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def solve_flow(data, overrides=None):
    # Solves the max flow problem described by 'data'
    if not isinstance(data, dict):
        return {"status": "error", "message": "Input must be a JSON object"}

    try:
        options = resolve_options(data, overrides)
        graph = graph_from_dict(data)
        solver = solve(
            graph,
            algorithm=options['algorithm'],
            traversal=options['traversal'],
            source=options['source'],
            sink=options['sink'],
        )
    except FlowError as e:
        logger.error("%s", e)
        return {"status": "error", "message": str(e)}

    return format_success(solver, options)


def format_success(solver, options):
    flows = []
    for e, flow in edge_flows(solver.graph):
        if flow > TOLERANCE:
            flows.append({
                "from": e.first.name,
                "to": e.second.name,
                "flow": _clean(flow)
            })

    return {
        "status": "ok",
        "algorithm": options['algorithm'],
        "max_flow": _clean(solver.flow),
        "flows": flows
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="fordflow", description="Ford-Fulkerson maximum flow")
    parser.add_argument("input", nargs="?", help="JSON graph file (default: stdin)")
    parser.add_argument("--algorithm", choices=ALGORITHMS)
    parser.add_argument("--traversal", choices=TRAVERSALS)
    parser.add_argument("--source", help="name of the source vertex")
    parser.add_argument("--sink", help="name of the sink vertex")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log every augmenting path")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point. Reads the input, solves, prints to stdout.
    """
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        if args.input:
            with open(args.input, 'r', encoding='utf-8') as f:
                data = json.load(f)
        else:
            data = json.load(sys.stdin.buffer)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        output = {"status": "error", "message": f"Invalid JSON input: {e}"}
        print(json.dumps(output, indent=2))
        sys.exit(1)
    except OSError as e:
        output = {"status": "error", "message": f"Cannot read {args.input}: {e}"}
        print(json.dumps(output, indent=2))
        sys.exit(1)

    overrides = {
        'algorithm': args.algorithm,
        'traversal': args.traversal,
        'source': args.source,
        'sink': args.sink,
    }
    output = solve_flow(data, overrides)

    print(json.dumps(output, indent=2))

    if output["status"] != "ok":
        sys.exit(1)


if __name__ == "__main__":
    main()
