"""
Rendering checks backed by sqlglot.
"""

from .dialects import DialectChecker

__all__ = ["DialectChecker"]
