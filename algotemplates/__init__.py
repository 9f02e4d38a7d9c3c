"""Classic algorithm templates: sorting, big numbers, data structures, graphs, number theory, DP and greedy methods."""

__version__ = "0.1.0"