"""Local configuration management for Stencil theme projects."""

__version__ = "0.1.0"
