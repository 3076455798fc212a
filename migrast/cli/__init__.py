"""
Command-line interface for migrast.
"""
