"""
Container d'injection de dépendances via dependency-injector.

Fournit une gestion centralisée des dépendances de l'application console.
"""

from dependency_injector import containers, providers

from .adapters.cli.controller import DvdLibraryController
from .adapters.cli.user_io import ConsoleUserIO
from .adapters.cli.view import DvdLibraryView
from .config import Settings
from .infrastructure.persistence import (
    DvdLibraryStorage,
    DvdSerializer,
    FileDvdLibraryDao,
)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        controller = container.controller()
        controller.run()
    """

    # Configuration - singleton chargé une seule fois
    config = providers.Singleton(Settings)

    # Stockage mémoire - une seule instance partagée par le repository
    storage = providers.Singleton(DvdLibraryStorage)

    serializer = providers.Singleton(
        DvdSerializer,
        delimiter=config.provided.delimiter,
    )

    # Repository fichier
    dvd_library_dao = providers.Singleton(
        FileDvdLibraryDao,
        storage=storage,
        serializer=serializer,
        file_path=config.provided.library_file,
    )

    # Interface console
    user_io = providers.Singleton(ConsoleUserIO)
    view = providers.Factory(DvdLibraryView, user_io=user_io)
    controller = providers.Factory(
        DvdLibraryController,
        view=view,
        dao=dvd_library_dao,
    )
