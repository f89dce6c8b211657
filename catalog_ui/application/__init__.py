"""Application components."""

from .console_app import ConsoleApp

__all__ = ["ConsoleApp"]
