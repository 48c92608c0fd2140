"""
Couche vue du catalogue de DVD.

Construit les textes affichés (menu, tableau de DVD, bannières) et
collecte les saisies via IUserIO. Aucune opération sur le catalogue.
"""

from enum import Enum
from typing import Iterable, Optional

from dvd_library.core.entities.dvd import Dvd
from dvd_library.core.ports.user_io import InputError, InputResult, IUserIO

MENU_TITLE = "Welcome to the DVD Library:"
MENU_PROMPT = "Please choose an option"
TITLE_PROMPT = "Enter the title of the DVD"

# Invites des champs, dans l'ordre de saisie
FIELD_PROMPTS: tuple[tuple[str, str], ...] = (
    ("title", TITLE_PROMPT),
    ("release_date", "Enter the release date for the DVD"),
    ("director_name", "Enter the name of the director for the DVD"),
    ("studio", "Enter the studio name of the DVD"),
    ("mpaa_rating", "Enter the MPAA rating for the DVD"),
    ("user_rating_and_note", "Enter the user rating/note for the DVD"),
)


class MenuSelection(Enum):
    """Choix du menu principal, dans l'ordre d'affichage (1 à 6)."""

    ADD = "Add a DVD"
    REMOVE = "Remove a DVD"
    EDIT = "Edit a DVD"
    LIST_ALL = "List all DVDs"
    GET = "Find DVD"
    EXIT = "Exit"


_SELECTIONS: tuple[MenuSelection, ...] = tuple(MenuSelection)

MENU_RANGE_MESSAGE = (
    f"Invalid menu selection. Select a number in the range [1, {len(_SELECTIONS)}]"
)


def build_banner(char: str) -> str:
    """
    Génère une bannière de la largeur minimale d'une ligne de DVD.

    Ex. char = '-' -> "-----...-----" (Dvd.formatted_length() caractères)
    """
    return char * max(0, Dvd.formatted_length())


def build_menu() -> str:
    """Construit le texte du menu principal."""
    lines = [MENU_TITLE]
    lines.extend(
        f"{index}) {selection.value}"
        for index, selection in enumerate(_SELECTIONS, start=1)
    )
    return "\n".join(lines)


class DvdLibraryView:
    """
    Vue principale de l'application.

    Args:
        user_io: Implémentation de IUserIO utilisée pour l'affichage et la saisie
    """

    def __init__(self, user_io: IUserIO) -> None:
        self._user_io = user_io

    def display_message(self, msg: str) -> None:
        self._user_io.display_message(msg)

    def display_error_message(self, msg: str) -> None:
        self._user_io.display_message(msg)

    def display_dvd(self, dvd: Optional[Dvd]) -> None:
        """Affiche un DVD avec l'en-tête, ou un message s'il est introuvable."""
        if dvd is None:
            self._user_io.display_message("DVD could not be found!")
            return
        self._user_io.display_message(
            "\n".join([Dvd.header_row(), build_banner("="), str(dvd)])
        )

    def display_dvd_collection(self, dvds: Iterable[Dvd]) -> None:
        """Affiche un tableau de DVD, chaque ligne suivie d'une bannière."""
        lines = [Dvd.header_row(), build_banner("=")]
        for dvd in dvds:
            lines.append(str(dvd))
            lines.append(build_banner("-"))
        self._user_io.display_message("\n".join(lines))

    def await_input_menu_selection(self) -> InputResult[MenuSelection]:
        """Affiche le menu et retourne le choix de l'utilisateur."""
        self._user_io.display_message(build_menu())
        result = self._user_io.get_input_number(MENU_PROMPT)
        if not result.ok:
            return InputResult.failure(result.error, result.message)

        value = result.value
        if isinstance(value, float):
            if not value.is_integer():
                return InputResult.failure(InputError.OUT_OF_RANGE, MENU_RANGE_MESSAGE)
            value = int(value)
        if not 1 <= value <= len(_SELECTIONS):
            return InputResult.failure(InputError.OUT_OF_RANGE, MENU_RANGE_MESSAGE)
        return InputResult.success(_SELECTIONS[value - 1])

    def await_input_dvd_title(self) -> InputResult[str]:
        return self._user_io.get_input_string(TITLE_PROMPT)

    def await_input_create_dvd(self) -> InputResult[Dvd]:
        """Saisit les six champs d'un nouveau DVD."""
        return self._await_input_dvd_values()

    def await_input_edit_dvd(self, dvd: Dvd) -> InputResult[Dvd]:
        """
        Saisit de nouvelles valeurs pour un DVD existant.

        Tous les champs sont redemandés ; le DVD passé n'est pas modifié,
        un nouveau DVD est retourne.
        """
        self._user_io.display_message(f"Editing: {dvd.title}")
        return self._await_input_dvd_values()

    def _await_input_dvd_values(self) -> InputResult[Dvd]:
        values: dict[str, str] = {}
        for field_name, prompt in FIELD_PROMPTS:
            result = self._user_io.get_input_string(prompt)
            if not result.ok:
                return InputResult.failure(result.error, result.message)
            values[field_name] = result.value
        return InputResult.success(Dvd(**values))
