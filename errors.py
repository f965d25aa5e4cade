class PageRankError(Exception):
    """Base class for graph and ranking errors."""


class InvalidGraph(PageRankError, ValueError):
    """Graph has no nodes (or a non-integer size)."""


class IndexOutOfRange(PageRankError, IndexError):
    """Node index outside the graph, or vectors of mismatched length."""


class GraphFormatError(PageRankError, ValueError):
    """Graph file could not be parsed."""
