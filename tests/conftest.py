"""
Fixtures pytest partagees pour les tests MovieRate.

Ce module contient les fixtures communes utilisees dans les tests:
- Configuration JSON par defaut et Settings de test avec chemins temporaires
- Mocks des interfaces (IFileSystem, IFilenameParser, IMovieInformer)
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from loguru import logger

from movierate.config import DEFAULT_CONFIG_FILE, MovieConfig, Settings
from movierate.core.entities.movie import Movie
from movierate.core.ports.api_clients import IMovieInformer
from movierate.core.ports.file_system import IFileSystem
from movierate.core.ports.parser import IFilenameParser
from movierate.core.value_objects import ParsedFilename


@pytest.fixture(autouse=True)
def reset_loguru():
    """Retire les handlers loguru ajoutes par un test (CLI)."""
    yield
    logger.remove()


@pytest.fixture
def movie_config() -> MovieConfig:
    """Configuration JSON livree avec l'application."""
    return MovieConfig.model_validate_json(DEFAULT_CONFIG_FILE.read_text(encoding="utf-8"))


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Le fichier utilisateur n'existe pas : la configuration par defaut
    est utilisee tant qu'un test ne l'a pas ecrit.
    """
    return Settings(
        _env_file=None,  # Ignorer le fichier .env pour les tests
        user_config_file=tmp_path / "config" / "userConfig.json",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def movies_dir(tmp_path: Path) -> Path:
    """Repertoire de films avec quelques fichiers video et non video."""
    root = tmp_path / "movies"
    (root / "Thrillers").mkdir(parents=True)
    (root / "Joker (2019) [Bluray] [1080p] [YTS.LT].mp4").touch()
    (root / "Thrillers" / "Se7en.1995.1080p.BluRay.mkv").touch()
    (root / "Amelie [2001].AVI").touch()
    (root / "Joker (2019) [Bluray] [1080p] [YTS.LT].srt").touch()
    (root / "notes.txt").touch()
    return root


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = True
    mock.walk_files.return_value = iter([])
    return mock


@pytest.fixture
def mock_filename_parser() -> MagicMock:
    """
    Mock de IFilenameParser pour les tests.

    Retourne le nom recu comme titre, sans annee.
    """
    mock = MagicMock(spec=IFilenameParser)
    mock.parse.side_effect = lambda name: ParsedFilename(title=name)
    return mock


@pytest.fixture
def mock_informer() -> AsyncMock:
    """
    Mock de IMovieInformer pour les tests.

    Par defaut, ajoute une note de 7.0 a chaque film.
    """
    mock = AsyncMock(spec=IMovieInformer)
    mock.source = "mock"

    async def fetch(movie: Movie) -> Movie:
        return Movie(title=movie.title, year=movie.year, path=movie.path, rating=7.0)

    mock.fetch.side_effect = fetch
    return mock
