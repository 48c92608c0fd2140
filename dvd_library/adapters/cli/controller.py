"""
Contrôleur du catalogue : boucle interactive du menu principal.

Cycle de vie d'une exécution :
1. Chargement du catalogue (échec fatal)
2. Boucle menu -> opération -> menu, jusqu'au choix Exit
3. Sauvegarde unique du catalogue (échec fatal)

Les erreurs de saisie et les titres introuvables sont affichés à
l'utilisateur et ne sortent jamais de la boucle.
"""

from typing import Callable, Optional

from loguru import logger

from dvd_library.core.exceptions import ControllerError, MalformedRecordError
from dvd_library.core.ports.repositories import IDvdLibraryDao
from dvd_library.core.ports.user_io import InputError

from .view import DvdLibraryView, MenuSelection


class DvdLibraryController:
    """
    Orchestration entre la vue et le repository.

    Args:
        view: Vue utilisée pour l'affichage et la saisie
        dao: Repository du catalogue
    """

    def __init__(self, view: DvdLibraryView, dao: IDvdLibraryDao) -> None:
        self._view = view
        self._dao = dao
        self._handlers: dict[MenuSelection, Callable[[], None]] = {
            MenuSelection.ADD: self.await_input_add_dvd,
            MenuSelection.REMOVE: self.await_input_remove_dvd,
            MenuSelection.EDIT: self.await_input_edit_dvd,
            MenuSelection.LIST_ALL: self.await_input_list_dvds,
            MenuSelection.GET: self.await_input_get_dvd_info,
        }

    def run(self) -> None:
        """
        Exécute l'application jusqu'au choix Exit.

        Raises:
            ControllerError: Si le catalogue ne peut pas être chargé ou sauvegardé
        """
        self._load()

        while True:
            selection = self._await_input_menu_selection()
            if selection is None:
                continue
            if selection is MenuSelection.EXIT:
                break
            logger.debug("Sélection du menu", selection=selection.name)
            self._handlers[selection]()

        self._save()

    def await_input_add_dvd(self) -> None:
        """Traite le choix ADD."""
        result = self._view.await_input_create_dvd()
        if not result.ok:
            self._view.display_error_message(result.message)
            return
        dvd = result.value
        self._dao.add_dvd(dvd)
        logger.info("DVD ajouté", title=dvd.title)
        self._view.display_message(f"{dvd.title} added to the library")

    def await_input_remove_dvd(self) -> None:
        """Traite le choix REMOVE."""
        result = self._view.await_input_dvd_title()
        if not result.ok:
            self._view.display_error_message(result.message)
            return
        title = result.value
        if not self._dao.remove_dvd(title):
            self._view.display_error_message(
                f"Failed to remove {title}: DVD does not exist in storage"
            )
            return
        logger.info("DVD supprimé", title=title)
        self._view.display_message(f"{title} removed from the library")

    def await_input_edit_dvd(self) -> None:
        """
        Traite le choix EDIT.

        Tous les champs sont ressaisis. Si le titre change, l'ancienne
        entrée est retirée avant l'insertion de la nouvelle.
        """
        result = self._view.await_input_dvd_title()
        if not result.ok:
            self._view.display_error_message(result.message)
            return
        title = result.value
        target = self._dao.get_dvd_info(title)
        if target is None:
            self._view.display_error_message("DVD not found")
            return

        edited = self._view.await_input_edit_dvd(target)
        if not edited.ok:
            self._view.display_error_message(edited.message)
            return
        self._dao.remove_dvd(title)
        self._dao.add_dvd(edited.value)
        logger.info("DVD modifié", title=title, new_title=edited.value.title)
        self._view.display_message(f"{edited.value.title} updated")

    def await_input_list_dvds(self) -> None:
        """Traite le choix LIST_ALL."""
        dvds = self._dao.get_all_dvds()
        if not dvds:
            self._view.display_error_message("No DVDs in the library")
            return
        self._view.display_dvd_collection(dvds)

    def await_input_get_dvd_info(self) -> None:
        """Traite le choix GET."""
        result = self._view.await_input_dvd_title()
        if not result.ok:
            self._view.display_error_message(result.message)
            return
        self._view.display_dvd(self._dao.get_dvd_info(result.value))

    def _await_input_menu_selection(self) -> Optional[MenuSelection]:
        """
        Récupère le choix du menu.

        Returns:
            Le choix, None si la saisie est invalide (message déjà affiche).
            La fin de l'entrée standard est traitée comme EXIT.
        """
        result = self._view.await_input_menu_selection()
        if result.ok:
            return result.value
        if result.error is InputError.END_OF_INPUT:
            logger.info("Fin de l'entrée standard, sortie du menu")
            return MenuSelection.EXIT
        self._view.display_error_message(result.message)
        return None

    def _load(self) -> None:
        try:
            loaded = self._dao.load()
        except MalformedRecordError as e:
            raise ControllerError(f"Failed to load DVD library: {e}") from e
        if not loaded:
            raise ControllerError("Failed to load DVD library")

    def _save(self) -> None:
        if not self._dao.save():
            raise ControllerError("Failed to save DVD library")
