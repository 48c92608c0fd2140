"""
Interface port pour les entrées/sorties utilisateur.

Toutes les méthodes get_* sont bloquantes : elles ne rendent la main
qu'une fois une saisie reçue. Les erreurs de saisie ne sont pas levées
mais retournées sous forme d'InputResult, que l'appelant inspecte.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Number = int | float


class InputError(Enum):
    """Type d'erreur de saisie.

    Valeurs:
        INVALID_NUMBER: Saisie non convertible en nombre
        OUT_OF_RANGE: Nombre en dehors de l'intervalle attendu
        END_OF_INPUT: Flux d'entrée ferme (fin de fichier)
    """

    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"
    END_OF_INPUT = "end_of_input"


@dataclass(frozen=True)
class InputResult(Generic[T]):
    """
    Résultat d'une saisie utilisateur.

    Contient soit une valeur, soit un type d'erreur accompagne d'un message.

    Attributs:
        value: Valeur saisie (None en cas d'erreur)
        error: Type d'erreur (None en cas de succès)
        message: Message d'erreur destiné à l'utilisateur
    """

    value: Optional[T] = None
    error: Optional[InputError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """Indique si la saisie a réussi."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "InputResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: InputError, message: str) -> "InputResult[T]":
        return cls(error=error, message=message)


class IUserIO(ABC):
    """
    Interface de dialogue avec l'utilisateur.

    Un msg à None signifie qu'aucune invite n'est affichée avant la saisie.
    """

    @abstractmethod
    def display_message(self, msg: str) -> None:
        """Affiche un message."""
        ...

    @abstractmethod
    def get_input_string(
        self,
        msg: Optional[str] = None,
        validate: Optional[Callable[[str], bool]] = None,
    ) -> InputResult[str]:
        """
        Attend une saisie texte.

        Args :
            msg : Invite affichée avant la saisie
            validate : Prédicat de validation ; la saisie est redemandée
                tant qu'il retourne False

        Retourne :
            InputResult avec le texte saisi, ou END_OF_INPUT
        """
        ...

    @abstractmethod
    def get_input_number(
        self,
        msg: Optional[str] = None,
        validate: Optional[Callable[[Number], bool]] = None,
    ) -> InputResult[Number]:
        """
        Attend une saisie numérique.

        Args :
            msg : Invite affichée avant la saisie
            validate : Prédicat de validation ; la saisie est redemandée
                tant qu'il retourne False

        Retourne :
            InputResult avec le nombre saisi, INVALID_NUMBER si la saisie
            n'est pas un nombre, ou END_OF_INPUT
        """
        ...
