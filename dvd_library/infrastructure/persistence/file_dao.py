"""
Repository du catalogue sauvegardé dans un fichier texte.

Implémentation concrète de IDvdLibraryDao : le catalogue vit en mémoire
(DvdLibraryStorage) et n'est lu/écrit sur disque qu'au chargement et à la
sauvegarde. Le fichier n'est ouvert que le temps de l'opération.

La sauvegarde écrit directement dans le fichier cible (pas de fichier
temporaire) : une erreur d'écriture peut laisser un fichier tronqué.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from dvd_library.core.entities.dvd import Dvd
from dvd_library.core.exceptions import MalformedRecordError
from dvd_library.core.ports.repositories import IDvdLibraryDao
from dvd_library.infrastructure.persistence.serializer import DvdSerializer
from dvd_library.infrastructure.persistence.storage import DvdLibraryStorage
from dvd_library.utils.constants import DEFAULT_LIBRARY_FILE

FILE_ENCODING = "utf-8"


class FileDvdLibraryDao(IDvdLibraryDao):
    """
    Implémentation de IDvdLibraryDao sur un fichier texte délimité.

    Une ligne par DVD, six champs joints par le délimiteur du serializer,
    sans en-tête.

    Attributes:
        file_path: Fichier lu par load() et écrit par save() par défaut
    """

    def __init__(
        self,
        storage: DvdLibraryStorage,
        serializer: Optional[DvdSerializer] = None,
        file_path: Path = DEFAULT_LIBRARY_FILE,
    ) -> None:
        self._storage = storage
        self._serializer = serializer or DvdSerializer()
        self.file_path = Path(file_path)

    def load(self, path: Optional[Path] = None) -> bool:
        """
        Peuple le stockage depuis le fichier.

        Toutes les lignes sont décodées avant insertion : en cas de ligne
        malformée, le stockage n'est pas modifié. Les lignes vides sont ignorées.

        Args:
            path: Fichier à lire (défaut: file_path)

        Returns:
            True si le fichier a été lu, False s'il n'a pas pu être ouvert

        Raises:
            MalformedRecordError: Si une ligne contient moins de six champs
        """
        source = Path(path) if path is not None else self.file_path
        try:
            with open(source, "r", encoding=FILE_ENCODING, newline="\n") as f:
                lines = [line.removesuffix("\n").removesuffix("\r") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Lecture du catalogue impossible", path=str(source), error=str(e))
            return False

        dvds: list[Dvd] = []
        for line_number, line in enumerate(lines, start=1):
            if not line:
                continue
            try:
                dvds.append(self._serializer.decode(line))
            except MalformedRecordError as e:
                logger.error(
                    "Ligne malformée dans le catalogue",
                    path=str(source),
                    line_number=line_number,
                )
                raise e.at_line(line_number) from e

        for dvd in dvds:
            self._storage.add(dvd)

        logger.info("Catalogue chargé", path=str(source), count=len(dvds))
        return True

    def save(self, path: Optional[Path] = None) -> bool:
        """
        Écrit tous les DVD du stockage dans le fichier (contenu précédent écrasé).

        Le contenu est encodé avant l'ouverture du fichier : une valeur non
        encodable en UTF-8 fait échouer la sauvegarde sans toucher au fichier.

        Args:
            path: Fichier à écrire (défaut: file_path)

        Returns:
            True si l'écriture et la synchronisation disque ont réussi, False sinon
        """
        target = Path(path) if path is not None else self.file_path
        dvds = self._storage.all()
        try:
            payload = "".join(f"{self._serializer.encode(dvd)}\n" for dvd in dvds).encode(
                FILE_ENCODING
            )
        except UnicodeEncodeError as e:
            logger.error("Catalogue non encodable", path=str(target), error=str(e))
            return False

        try:
            with open(target, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            logger.error("Sauvegarde du catalogue impossible", path=str(target), error=str(e))
            return False

        logger.info("Catalogue sauvegardé", path=str(target), count=len(dvds))
        return True

    def add_dvd(self, dvd: Dvd) -> None:
        self._storage.add(dvd)

    def remove_dvd(self, title: str) -> bool:
        return self._storage.remove(title)

    def get_dvd_info(self, title: str) -> Optional[Dvd]:
        return self._storage.get(title)

    def get_all_dvds(self) -> list[Dvd]:
        return self._storage.all()
