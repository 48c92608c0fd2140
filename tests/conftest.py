"""
Fixtures pytest partagées pour les tests DVD Library.

Ce module contient les fixtures communes utilisées dans les tests:
- IUserIO scripté (saisies prédéfinies, messages captures)
- DVD d'exemple
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from dvd_library.config import Settings
from dvd_library.core.entities.dvd import Dvd
from dvd_library.core.ports.user_io import InputError, InputResult, IUserIO, Number
from dvd_library.utils.helpers import parse_number


class ScriptedUserIO(IUserIO):
    """
    IUserIO alimente par une liste de saisies prédéfinies.

    Quand les saisies sont épuisées, retourne END_OF_INPUT comme le ferait
    la console sur une entrée standard fermée.
    """

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self.inputs = list(inputs)
        self.messages: list[str] = []
        self.prompts: list[Optional[str]] = []

    @property
    def output(self) -> str:
        return "\n".join(self.messages)

    def display_message(self, msg: str) -> None:
        self.messages.append(msg)

    def get_input_string(
        self,
        msg: Optional[str] = None,
        validate: Optional[Callable[[str], bool]] = None,
    ) -> InputResult[str]:
        return self._next(msg, validate, lambda text: text)

    def get_input_number(
        self,
        msg: Optional[str] = None,
        validate: Optional[Callable[[Number], bool]] = None,
    ) -> InputResult[Number]:
        return self._next(msg, validate, parse_number)

    def _next(self, msg, validate, convert):
        while True:
            self.prompts.append(msg)
            if not self.inputs:
                return InputResult.failure(InputError.END_OF_INPUT, "No more input available")
            value = convert(self.inputs.pop(0))
            if value is None:
                return InputResult.failure(InputError.INVALID_NUMBER, "Invalid input")
            if validate is None or validate(value):
                return InputResult.success(value)
            self.messages.append("Invalid Input, please try again")


@pytest.fixture
def make_user_io() -> Callable[..., ScriptedUserIO]:
    """Fabrique d'IUserIO scripté : make_user_io("1", "Inception", ...)."""

    def factory(*inputs: str) -> ScriptedUserIO:
        return ScriptedUserIO(inputs)

    return factory


@pytest.fixture
def inception() -> Dvd:
    """DVD type utilise dans les scenarios."""
    return Dvd(
        title="Inception",
        release_date="2010",
        mpaa_rating="PG-13",
        director_name="C. Nolan",
        studio="WB",
        user_rating_and_note="9/10",
    )


@pytest.fixture
def alien() -> Dvd:
    """Second DVD pour les tests de collection."""
    return Dvd(
        title="Alien",
        release_date="1979",
        mpaa_rating="R",
        director_name="Ridley Scott",
        studio="20th Century Fox",
        user_rating_and_note="Classic",
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le catalogue et les logs.
    """
    return Settings(
        library_file=tmp_path / "DVDLibrary.txt",
        log_file=tmp_path / "logs" / "test.log",
        log_level="WARNING",
    )
