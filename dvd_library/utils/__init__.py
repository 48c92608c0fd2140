"""
Utilitaires et constantes pour DVD Library.

Ce module contient les constantes et fonctions utilitaires partagées.
"""

from dvd_library.utils.constants import (
    COLUMN_SEPARATOR,
    DEFAULT_DELIMITER,
    DEFAULT_LIBRARY_FILE,
)
from dvd_library.utils.helpers import format_columns, parse_number

__all__ = [
    "COLUMN_SEPARATOR",
    "DEFAULT_DELIMITER",
    "DEFAULT_LIBRARY_FILE",
    "format_columns",
    "parse_number",
]
