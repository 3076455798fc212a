"""
Shared utilities, constants and exceptions.
"""

from .constants import *
from .exceptions import *
from .text import join_list, join_non_empty, to_bool

__all__ = [
    # Exceptions
    "MigrastError",
    "UnresolvableSchemaReference",
    "StatementDependencyError",
    "StatementLoadError",
    "RenderValidationError",
    # Constants
    "DEFAULT_DIALECT",
    "DEFAULT_TERMINATOR",
    "ALWAYS_TRUE_CONDITION",
    "SUPPORTED_OUTPUT_FORMATS",
    "SUPPORTED_DOCUMENT_EXTENSIONS",
    "CONFIG_FILES",
    # Utilities
    "join_non_empty",
    "join_list",
    "to_bool",
]
