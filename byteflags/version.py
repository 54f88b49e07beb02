"""
byteflags version information

This file contains the single source of truth for the package version.
pyproject.toml reads it at build time.
"""

# Version number (semantic versioning)
__version__ = "1.0.1"
