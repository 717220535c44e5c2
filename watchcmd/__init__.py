"""Run a shell command periodically at a configurable interval."""

__version__ = "0.0.1"
__all__ = ["__version__"]