"""API routers."""

from . import audio, stories

__all__ = ["audio", "stories"]
