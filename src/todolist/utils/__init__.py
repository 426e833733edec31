"""Shared helpers."""

from .logger import EventLog

__all__ = ["EventLog"]
