"""
Configuration de l'application.

Deux niveaux de configuration coexistent :
- Settings : parametres de l'application via pydantic-settings, charges depuis
  les variables d'environnement avec le prefixe MOVIERATE_ et un fichier .env
  optionnel (serveur, logging, emplacement des fichiers de configuration).
- MovieConfig : configuration du scan et de l'API, stockee en JSON
  (userConfig.json edite depuis la page de reglages, sinon config.json livre
  avec le package).
"""

import re
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movierate.exceptions import ConfigurationError

# Trouver le fichier .env a la racine du projet (parent de movierate/)
_PACKAGE_DIR = Path(__file__).parent
_PROJECT_ROOT = _PACKAGE_DIR.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_CONFIG_FILE = _PACKAGE_DIR / "assets" / "config.json"

# Fournisseurs de metadonnees reconnus (toute autre valeur => aucun appel API)
SUPPORTED_APIS: tuple[str, ...] = ("omdb", "tmdb", "none")


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe MOVIERATE_.
    Exemple : MOVIERATE_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIERATE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fichiers de configuration JSON (utilisateur en priorite, puis defaut)
    default_config_file: Path = Field(default=DEFAULT_CONFIG_FILE)
    user_config_file: Path = Field(default=Path("~/.config/movierate/userConfig.json"))

    # Serveur web
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movierate.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("default_config_file", "user_config_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accepte le niveau de log en minuscules."""
        return v.strip().upper()


class MovieConfig(BaseModel):
    """Configuration du scan et de l'enrichissement, persistee en JSON.

    Les cles JSON (NameParserExpression, TitleCleanupExpression, ...) sont
    conservees telles quelles pour rester compatibles avec les fichiers
    existants ; les attributs Python utilisent des noms snake_case.

    Attributs:
        name_parser_expressions: Expressions essayees dans l'ordre. Le groupe 1
            capture le titre, le groupe 2 (optionnel) l'annee.
        title_cleanup_expression: Motif remplace par un espace dans le titre
        extension_expression: Motif applique a l'extension (ex: ".mkv")
        api_key: Cle de l'API de metadonnees
        movie_api: Fournisseur de metadonnees ("omdb", "tmdb" ou "none")
    """

    model_config = ConfigDict(populate_by_name=True)

    name_parser_expressions: list[str] = Field(alias="NameParserExpression", min_length=1)
    title_cleanup_expression: str = Field(default=r"[._]", alias="TitleCleanupExpression")
    extension_expression: str = Field(alias="ExtensionExpression")
    api_key: str = Field(default="", alias="APIKey")
    movie_api: str = Field(default="none", alias="MovieAPI")

    @field_validator("name_parser_expressions")
    @classmethod
    def check_name_parsers(cls, v: list[str]) -> list[str]:
        """Chaque expression doit compiler et capturer au moins le titre."""
        for expression in v:
            pattern = _compile(expression)
            if pattern.groups < 1:
                raise ValueError(f"L'expression '{expression}' doit capturer le titre (groupe 1)")
        return v

    @field_validator("title_cleanup_expression", "extension_expression")
    @classmethod
    def check_expression(cls, v: str) -> str:
        if not v:
            raise ValueError("L'expression ne peut pas etre vide")
        _compile(v)
        return v

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip()

    @field_validator("movie_api")
    @classmethod
    def normalize_movie_api(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def name_parsers(self) -> list[re.Pattern[str]]:
        """Expressions de parsing compilees, dans l'ordre de priorite."""
        return [re.compile(expression) for expression in self.name_parser_expressions]

    @property
    def title_cleanup(self) -> re.Pattern[str]:
        return re.compile(self.title_cleanup_expression)

    @property
    def extension_pattern(self) -> re.Pattern[str]:
        return re.compile(self.extension_expression)


def _compile(expression: str) -> re.Pattern[str]:
    """Compile une expression ou leve ValueError avec un message lisible."""
    try:
        return re.compile(expression)
    except re.error as e:
        raise ValueError(f"Expression reguliere invalide '{expression}' : {e}") from e


def load_movie_config(settings: Settings) -> MovieConfig:
    """
    Charge la configuration JSON des films.

    Le fichier utilisateur est prioritaire ; s'il n'existe pas, le fichier
    par defaut livre avec l'application est utilise.

    Args:
        settings: Parametres indiquant l'emplacement des fichiers

    Returns:
        MovieConfig valide

    Raises:
        ConfigurationError: Si aucun fichier n'existe ou si le contenu est invalide
    """
    for path in (settings.user_config_file, settings.default_config_file):
        if not path.exists():
            logger.debug(f"Fichier de configuration absent : {path}")
            continue
        try:
            config = MovieConfig.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise ConfigurationError(f"Configuration invalide dans {path} : {e}") from e
        logger.info(f"Configuration chargee depuis {path}")
        return config

    raise ConfigurationError(
        "Aucun fichier de configuration trouve "
        f"({settings.user_config_file}, {settings.default_config_file})"
    )


def save_movie_config(config: MovieConfig, path: Path) -> None:
    """
    Ecrit la configuration JSON en conservant les cles d'origine.

    Args:
        config: Configuration a sauvegarder
        path: Fichier de destination (repertoires parents crees si besoin)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")
    logger.info(f"Configuration sauvegardee dans {path}")
