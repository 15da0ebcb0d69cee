"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINESHELF_,
et peut optionnellement être fournie via un fichier .env.

La clé API OMDb est optionnelle - la recherche de métadonnées est désactivée si non fournie.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.constants import DEFAULT_COVER_URL, IMPORT_ERROR_PREVIEW

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINESHELF_.
    Exemple : CINESHELF_CSV_DIALECT=standard

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINESHELF_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///cineshelf.db")

    # Clé API (OPTIONNELLE - recherche désactivée si non définie)
    omdb_api_key: Optional[str] = Field(default=None)
    api_cache_dir: Path = Field(default=Path(".cache/api"))

    # Import CSV
    csv_dialect: Literal["minimal", "standard"] = Field(default="minimal")
    import_error_preview: int = Field(default=IMPORT_ERROR_PREVIEW, ge=0)
    default_cover_url: str = Field(default=DEFAULT_COVER_URL)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cineshelf.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("api_cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def lookup_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb_api_key)
