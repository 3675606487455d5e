"""Installable entry package for the portal mock server."""

from __future__ import annotations

from app import __version__, create_app

__all__ = ["__version__", "create_app"]
