"""Classic competitive-programming algorithms: data structures, number theory,
geometry, search techniques, shortest paths, maximum flow and trees."""

__version__ = "0.1.0"

__all__ = ["data_structures", "number_theory", "geometry", "techniques", "graph", "flow", "trees"]