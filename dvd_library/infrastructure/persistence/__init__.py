"""
Persistance du catalogue de DVD.

- DvdLibraryStorage : conteneur mémoire indexé par titre
- DvdSerializer : conversion Dvd <-> ligne délimitée
- FileDvdLibraryDao : chargement/sauvegarde depuis un fichier texte
"""

from dvd_library.infrastructure.persistence.file_dao import FileDvdLibraryDao
from dvd_library.infrastructure.persistence.serializer import DvdSerializer
from dvd_library.infrastructure.persistence.storage import DvdLibraryStorage

__all__ = [
    "DvdLibraryStorage",
    "DvdSerializer",
    "FileDvdLibraryDao",
]
