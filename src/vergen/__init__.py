"""Generate a source file with build-version constants from git."""

__version__ = "1.0.0"
