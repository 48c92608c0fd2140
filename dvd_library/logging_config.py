"""
Configuration du logging de DVD Library via loguru.

Deux sorties :
- stderr : niveau choisi par la configuration et les options -v/-q, pour ne
  pas se mélanger au menu affiché sur stdout
- fichier JSON : tout à partir de DEBUG, avec rotation, chaque enregistrement
  portant le catalogue en cours dans ses extras
"""

import sys
from typing import Any

from loguru import logger

from dvd_library.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)

# Nombre de -v -> niveau console
VERBOSE_LEVELS = {1: "INFO", 2: "DEBUG"}
QUIET_LEVEL = "ERROR"


def console_level(default: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Niveau de la sortie stderr selon les options de la CLI.

    -q l'emporte sur -v ; au-delà de -vv le niveau reste DEBUG.
    """
    if quiet:
        return QUIET_LEVEL
    if verbose > 0:
        return VERBOSE_LEVELS[min(verbose, max(VERBOSE_LEVELS))]
    return default


def build_handlers(settings: Settings, level: str) -> list[dict[str, Any]]:
    """Handlers loguru du catalogue : stderr coloré puis fichier JSON rotatif."""
    return [
        {
            "sink": sys.stderr,
            "level": level,
            "format": CONSOLE_FORMAT,
            "colorize": True,
        },
        {
            "sink": settings.log_file,
            "level": "DEBUG",
            "serialize": True,
            "rotation": settings.log_rotation_size,
            "retention": settings.log_retention_count,
            "compression": "zip",
            "enqueue": True,
        },
    ]


def configure_logging(settings: Settings, verbose: int = 0, quiet: bool = False) -> str:
    """
    Remplace les handlers loguru par ceux du catalogue.

    Args:
        settings: Paramètres actifs (niveau par défaut, fichier de log, rotation)
        verbose: Nombre d'options -v reçues
        quiet: Option -q reçue

    Returns:
        Le niveau retenu pour la sortie stderr
    """
    level = console_level(settings.log_level, verbose, quiet)
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.configure(
        handlers=build_handlers(settings, level),
        extra={"library_file": str(settings.library_file)},
    )
    logger.debug("Logging configuré", console_level=level, log_file=str(settings.log_file))
    return level
