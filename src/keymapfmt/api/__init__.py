"""HTTP API for keymapfmt."""

from .app import create_app

__all__ = ["create_app"]
