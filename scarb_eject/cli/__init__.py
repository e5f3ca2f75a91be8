"""Command implementations for the scarb-eject CLI."""

from .eject import eject_command

__all__ = ["eject_command"]
