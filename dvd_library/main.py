"""
Point d'entrée CLI de DVD Library.

Initialise le container DI, configure le logging et lance la boucle
interactive du catalogue.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from dependency_injector import providers
from loguru import logger
from rich.markup import escape

from . import __version__
from .adapters.cli import console
from .config import Settings
from .container import Container
from .core.exceptions import ControllerError
from .logging_config import configure_logging

app = typer.Typer(
    name="dvdlib",
    help="Catalogue de DVD en mode console",
)
container = Container()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Fichier du catalogue (défaut: DVDLibrary.txt)"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """DVD Library - Gestion d'un catalogue de DVD. Sans commande, lance le menu."""
    if file is not None:
        settings = get_config().model_copy(update={"library_file": file.expanduser()})
        container.config.override(providers.Object(settings))
        container.reset_singletons()

    settings = get_config()
    configure_logging(settings, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        run_library(settings)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def ensure_library_file(settings: Settings) -> None:
    """Crée un catalogue vide si le fichier n'existe pas et que la configuration le permet."""
    library_file = settings.library_file
    if not settings.create_missing_library or library_file.exists():
        return
    try:
        library_file.parent.mkdir(parents=True, exist_ok=True)
        library_file.touch()
    except OSError as e:
        # Le chargement échouera et sera signalé comme erreur fatale
        logger.warning("Création du catalogue impossible", path=str(library_file), error=str(e))
        return
    logger.info("Catalogue vide créé", path=str(library_file))


def run_library(settings: Settings) -> None:
    """
    Lance la boucle interactive du catalogue.

    Raises:
        typer.Exit: code 1 si le catalogue ne peut pas être chargé ou sauvegardé
    """
    ensure_library_file(settings)
    controller = container.controller()

    logger.info("Démarrage de DVD Library", version=__version__, library=str(settings.library_file))
    try:
        controller.run()
    except ControllerError as e:
        logger.error("Arrêt sur erreur fatale", error=str(e))
        console.print(f"[red]{escape(str(e))}[/red]", emoji=False, soft_wrap=True)
        raise typer.Exit(code=1) from e
    logger.info("Arrêt de DVD Library")


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Catalogue : {config.library_file}")
    typer.echo(f"Délimiteur : {config.delimiter}")
    typer.echo(f"Création si absent : {'oui' if config.create_missing_library else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"DVD Library v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
