"""Command line interface for notif-format."""

from .app import main

__all__ = ['main']
