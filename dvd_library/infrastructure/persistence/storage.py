"""
Stockage mémoire des DVD, indexes par titre.

Le titre est une clé exacte et sensible à la casse. Un ajout avec un
titre existant remplace le DVD précédent.
"""

from typing import Iterable, Iterator, Optional

from dvd_library.core.entities.dvd import Dvd


class DvdLibraryStorage:
    """
    Conteneur des DVD du catalogue.

    Garantit que chaque clé est égale au titre du DVD associé.
    L'ordre d'énumération n'est pas garanti par le contrat.
    """

    def __init__(self, dvds: Optional[Iterable[Dvd]] = None) -> None:
        self._library: dict[str, Dvd] = {}
        for dvd in dvds or ():
            self.add(dvd)

    def add(self, dvd: Dvd) -> None:
        """Ajoute ou remplace un DVD."""
        self._library[dvd.title] = dvd

    def remove(self, title: str) -> bool:
        """Supprime un DVD. Retourne False si le titre est absent."""
        return self._library.pop(title, None) is not None

    def get(self, title: str) -> Optional[Dvd]:
        """Récupère un DVD par titre, None si absent."""
        return self._library.get(title)

    def all(self) -> list[Dvd]:
        """Retourne un instantane de tous les DVD."""
        return list(self._library.values())

    def is_empty(self) -> bool:
        return not self._library

    def clear(self) -> None:
        self._library.clear()

    def __len__(self) -> int:
        return len(self._library)

    def __contains__(self, title: object) -> bool:
        return title in self._library

    def __iter__(self) -> Iterator[Dvd]:
        return iter(self.all())
