"""
Implémentation console de IUserIO avec Rich.

Les messages sont affichés tels quels (sans balisage Rich) et sans retour
à la ligne automatique, pour garder l'alignement du tableau des DVD.
Les saisies sont lues par Console.input et rendues sans nettoyage : les
espaces autour d'un titre en font partie.
"""

from typing import Callable, Optional, TypeVar

from rich.console import Console

from dvd_library.core.ports.user_io import InputError, InputResult, IUserIO, Number
from dvd_library.utils.helpers import parse_number

T = TypeVar("T")

INVALID_INPUT_MESSAGE = "Invalid input"
RETRY_MESSAGE = "Invalid Input, please try again"
END_OF_INPUT_MESSAGE = "No more input available"


class ConsoleUserIO(IUserIO):
    """Dialogue utilisateur sur le terminal (stdin/stdout)."""

    def __init__(self, console: Optional[Console] = None) -> None:
        if console is None:
            from . import console as shared_console

            console = shared_console
        self._console = console

    def display_message(self, msg: str) -> None:
        self._console.print(msg, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def get_input_string(
        self,
        msg: Optional[str] = None,
        validate: Optional[Callable[[str], bool]] = None,
    ) -> InputResult[str]:
        return self._get_user_input(msg, validate, lambda text: text)

    def get_input_number(
        self,
        msg: Optional[str] = None,
        validate: Optional[Callable[[Number], bool]] = None,
    ) -> InputResult[Number]:
        return self._get_user_input(msg, validate, parse_number)

    def _read_line(self, msg: Optional[str]) -> str:
        """Lit une ligne telle que saisie, espaces de tête et de fin compris."""
        prompt = "" if msg is None else f"{msg}: "
        return self._console.input(prompt, markup=False, emoji=False)

    def _get_user_input(
        self,
        msg: Optional[str],
        validate: Optional[Callable[[T], bool]],
        convert: Callable[[str], Optional[T]],
    ) -> InputResult[T]:
        """
        Lit une saisie jusqu'à ce que le prédicat de validation soit satisfait.

        Args:
            msg: Invite affichée avant chaque saisie
            validate: Prédicat sur la valeur convertie (None = tout accepter)
            convert: Conversion du texte saisi, None si la conversion échoue

        Returns:
            InputResult avec la valeur, INVALID_NUMBER si la conversion échoue,
            END_OF_INPUT si l'entrée standard est fermée
        """
        while True:
            try:
                text = self._read_line(msg)
            except EOFError:
                return InputResult.failure(InputError.END_OF_INPUT, END_OF_INPUT_MESSAGE)

            value = convert(text)
            if value is None:
                return InputResult.failure(InputError.INVALID_NUMBER, INVALID_INPUT_MESSAGE)
            if validate is None or validate(value):
                return InputResult.success(value)
            self.display_message(RETRY_MESSAGE)
