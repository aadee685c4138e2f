"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe BOOKSTORE_,
et peut optionnellement être fournie via un fichier .env.

L'URL de base (base_url) est l'adresse externe du déploiement : elle sert à
construire l'URI d'accès renvoyée dans les identifiants des bindings.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de bookstore_broker/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe BOOKSTORE_.
    Exemple : BOOKSTORE_BASE_URL=https://bookstore.example.com
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Adresse externe du déploiement
    base_url: str = Field(default="http://localhost:8080")

    # Base de données (driver asynchrone obligatoire)
    database_url: str = Field(default="sqlite+aiosqlite:///bookstore.db")

    # Administrateur créé au premier démarrage
    admin_username: str = Field(default="admin")
    admin_password: str = Field(default="supersecret")

    # Mots de passe générés pour les bindings
    password_length: int = Field(default=12, ge=8, le=128)
    password_hash_iterations: int = Field(default=100_000, ge=1000)

    # Délai maximal d'une requête broker côté transport (secondes)
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Catalogue exposé aux plateformes
    service_id: str = Field(default="bdb1be2e-360b-495c-8115-d7697f9c6a9e")
    service_name: str = Field(default="bookstore")
    service_description: str = Field(default="A simple book store service")
    plan_id: str = Field(default="b973fb78-82f3-49ef-9b8b-c1876974a6cd")
    plan_name: str = Field(default="standard")
    plan_description: str = Field(default="A simple book store plan")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/bookstore-broker.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le slash final pour la construction des URIs."""
        return v.rstrip("/")
