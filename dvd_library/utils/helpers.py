"""
Fonctions utilitaires partagées.

Fournit l'analyse des nombres saisis par l'utilisateur et la mise en forme
des colonnes à largeur minimale.
"""

import re
from typing import Optional, Sequence

from dvd_library.utils.constants import COLUMN_SEPARATOR

# Entier ou décimal signé, séparateurs de milliers autorisés (ex: "1,000")
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d{1,3}(,\d{3})+|\d+)(\.\d+)?$")


def parse_number(text: str) -> Optional[int | float]:
    """
    Convertit une saisie utilisateur en nombre.

    Args:
        text: Texte saisi (les espaces autour sont ignores)

    Returns:
        int si la saisie est entière, float si elle a une partie décimale,
        None si la saisie n'est pas un nombre
    """
    cleaned = text.strip()
    if not _NUMBER_PATTERN.match(cleaned):
        return None

    cleaned = cleaned.replace(",", "")
    if "." in cleaned:
        return float(cleaned)
    return int(cleaned)


def format_columns(
    values: Sequence[str],
    widths: Sequence[int],
    separator: str = COLUMN_SEPARATOR,
) -> str:
    """
    Aligne des valeurs à gauche dans des colonnes à largeur minimale.

    Les valeurs plus longues que leur colonne ne sont jamais tronquées.
    Les valeurs au-delà de la dernière largeur ne sont pas complétées.

    Args:
        values: Valeurs à afficher, dans l'ordre des colonnes
        widths: Largeurs minimales des premières colonnes
        separator: Séparateur entre colonnes

    Returns:
        La ligne formatée
    """
    cells = [
        f"{value:<{widths[index]}}" if index < len(widths) else value
        for index, value in enumerate(values)
    ]
    return separator.join(cells)
