"""
Package CLI interactive avec Rich.

Réexporte les symboles principaux (from dvd_library.adapters.cli import ...).
"""

from rich.console import Console

# Console globale pour tous les affichages
console = Console()

from .user_io import ConsoleUserIO
from .view import DvdLibraryView, MenuSelection
from .controller import DvdLibraryController

__all__ = [
    "console",
    "ConsoleUserIO",
    "DvdLibraryView",
    "MenuSelection",
    "DvdLibraryController",
]
