"""Configuration, autocorrection, file discovery and reporting for a Ruby linter."""

__version__ = "0.0.1"