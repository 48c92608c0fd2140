"""
Interface port pour le repository du catalogue.

Interface abstraite (port) définissant le contrat d'accès aux DVD.
L'implémentation (adaptateur) fournit le mécanisme de stockage concret
(fichier texte délimité, stockage en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from dvd_library.core.entities.dvd import Dvd


class IDvdLibraryDao(ABC):
    """
    Interface d'accès au catalogue de DVD.

    Définit les opérations de cycle de vie (load/save) et les opérations
    sur les DVD, indexes par titre.
    """

    @abstractmethod
    def load(self, path: Optional[Path] = None) -> bool:
        """
        Peuple le catalogue depuis le stockage persistant.

        Retourne :
            True si le chargement a réussi, False si la source est illisible
        """
        ...

    @abstractmethod
    def save(self, path: Optional[Path] = None) -> bool:
        """
        Écrit le catalogue dans le stockage persistant.

        Retourne :
            True si la sauvegarde a réussi, False sinon
        """
        ...

    @abstractmethod
    def add_dvd(self, dvd: Dvd) -> None:
        """Ajoute un DVD, en remplaçant celui qui porte le même titre."""
        ...

    @abstractmethod
    def remove_dvd(self, title: str) -> bool:
        """Supprime un DVD par titre. Retourne True si supprimé."""
        ...

    @abstractmethod
    def get_dvd_info(self, title: str) -> Optional[Dvd]:
        """Récupère un DVD par son titre exact."""
        ...

    @abstractmethod
    def get_all_dvds(self) -> list[Dvd]:
        """Liste tous les DVD du catalogue (ordre non garanti)."""
        ...
