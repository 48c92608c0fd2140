"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe DVDLIB_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dvd_library.utils.constants import DEFAULT_DELIMITER, DEFAULT_LIBRARY_FILE


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe DVDLIB_.
    Exemple : DVDLIB_LIBRARY_FILE=~/dvds.txt

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="DVDLIB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalogue
    library_file: Path = Field(default=DEFAULT_LIBRARY_FILE)
    delimiter: str = Field(default=DEFAULT_DELIMITER, min_length=1)
    # Crée un catalogue vide au démarrage si le fichier n'existe pas
    create_missing_library: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("logs/dvdlibrary.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("library_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return v.upper()
