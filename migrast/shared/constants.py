"""
Constants for migrast.
"""

# SQL dialect used for validation when none is configured
DEFAULT_DIALECT = "postgres"

# Statement terminator appended to each statement of a migration script
DEFAULT_TERMINATOR = ";"

# Where-clause rendered when an update or select has no condition
ALWAYS_TRUE_CONDITION = "1 = 1"

# Supported export formats for dependency edges
SUPPORTED_OUTPUT_FORMATS = ["json", "yaml"]

# Statement document extensions understood by the loader
SUPPORTED_DOCUMENT_EXTENSIONS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}

# Configuration files, in lookup order
CONFIG_FILES = ["pyproject.toml", "migrast.toml"]
