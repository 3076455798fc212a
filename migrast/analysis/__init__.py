"""
Analysis layer for batch dependency edge extraction.
"""

from .edges import EdgeExtractor, StatementEdges, extract_edges

__all__ = [
    "EdgeExtractor",
    "StatementEdges",
    "extract_edges",
]
