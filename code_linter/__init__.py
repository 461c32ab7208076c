"""Pattern-based code quality linter."""

__version__ = "1.0.0"
