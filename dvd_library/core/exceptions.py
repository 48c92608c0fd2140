"""
Exceptions du domaine DVD Library.

- DvdLibraryError : base de toutes les erreurs de l'application
- MalformedRecordError : ligne persistée qui ne contient pas les six champs
- ControllerError : erreur fatale du cycle de vie (chargement/sauvegarde)
"""

from typing import Optional


class DvdLibraryError(Exception):
    """Erreur de base de l'application."""


class MalformedRecordError(DvdLibraryError):
    """
    Ligne sérialisée impossible à décoder en Dvd.

    Attributes:
        line: Texte de la ligne fautive
        line_number: Numéro de ligne (1-indexé) dans le fichier, si connu
    """

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Malformed DVD record{location}: {line!r}")

    def at_line(self, line_number: int) -> "MalformedRecordError":
        """Retourne une copie de l'erreur rattachée à un numéro de ligne."""
        return MalformedRecordError(self.line, line_number)


class ControllerError(DvdLibraryError):
    """Erreur fatale rencontrée par le contrôleur (chargement ou sauvegarde)."""
