"""Query helpers for Python sequences: aggregation, membership, set
operations, element access, extrema, ordering and partitioning."""

__version__ = "0.1.0"
__all__ = [
    "aggregation",
    "elements",
    "errors",
    "extrema",
    "membership",
    "ordering",
    "partition",
    "sets",
]