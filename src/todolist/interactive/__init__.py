"""Interactive (Textual) front end."""

from .app import TodoApp

__all__ = ["TodoApp"]
