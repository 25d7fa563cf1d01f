"""
Commands module for the tvdbxml CLI
"""

from .search_command import search_command
from .show_command import show_command

__all__ = ["search_command", "show_command"]
