"""
Sérialisation d'un Dvd en une ligne de texte délimitée.

Format d'une ligne (délimiteur "::" par défaut) :
TITLE::RELEASE_DATE::MPAA_RATING::DIRECTOR_NAME::STUDIO_NAME::USER_RATING

Les valeurs ne sont pas échappées : un champ contenant le délimiteur
produit une ligne qui sera mal relue.
"""

from dvd_library.core.entities.dvd import Dvd
from dvd_library.core.exceptions import MalformedRecordError
from dvd_library.utils.constants import DEFAULT_DELIMITER

# Nombre de champs d'une ligne sérialisée
FIELD_COUNT = 6


class DvdSerializer:
    """
    Convertit un Dvd en ligne délimitée et inversement.

    Example:
        serializer = DvdSerializer()
        line = serializer.encode(Dvd(title="Inception", ...))
        dvd = serializer.decode(line)
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        """
        Args:
            delimiter: Séparateur des champs (non vide)

        Raises:
            ValueError: Si le délimiteur est vide
        """
        if not delimiter:
            raise ValueError("Le délimiteur ne peut pas être vide")
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def encode(self, dvd: Dvd) -> str:
        """Joint les six champs, sans délimiteur final ni saut de ligne."""
        return self._delimiter.join(dvd.fields())

    def decode(self, text: str) -> Dvd:
        """
        Reconstruit un Dvd depuis une ligne sérialisée.

        Les champs au-delà du sixième sont ignores.

        Raises:
            MalformedRecordError: Si la ligne contient moins de six champs
        """
        tokens = text.split(self._delimiter)
        if len(tokens) < FIELD_COUNT:
            raise MalformedRecordError(text)
        return Dvd(*tokens[:FIELD_COUNT])
