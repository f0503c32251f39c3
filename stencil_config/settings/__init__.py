"""Application settings loading."""

from .app import StencilSettings, get_settings


__all__ = ["StencilSettings", "get_settings"]
