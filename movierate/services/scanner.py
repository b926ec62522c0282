"""
Service de scan des repertoires de films.

Orchestre le scan des fichiers video en coordonnant le systeme de fichiers
et le parser de noms de fichiers.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from movierate.config import MovieConfig
from movierate.core.entities.movie import Movie
from movierate.core.ports.file_system import IFileSystem
from movierate.core.ports.parser import IFilenameParser
from movierate.exceptions import FilenameParseError, ScanError


class ScannerService:
    """
    Service orchestrant le scan des repertoires de films.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour parcourir les repertoires
    - Le parser de noms (IFilenameParser) pour extraire titre et annee
    - L'expression d'extension de MovieConfig pour reconnaitre les videos
    """

    def __init__(
        self,
        file_system: IFileSystem,
        filename_parser: IFilenameParser,
        movie_config: MovieConfig,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour le parcours
            filename_parser: Implementation de IFilenameParser pour le parsing
            movie_config: Configuration (expression des extensions video)
        """
        self._file_system = file_system
        self._filename_parser = filename_parser
        self._extension_pattern = movie_config.extension_pattern

    def scan(self, directory: Path) -> list[Movie]:
        """
        Scanne un repertoire et cree un Movie par fichier video trouve.

        Args:
            directory: Repertoire racine a parcourir recursivement

        Returns:
            Films trouves, dans l'ordre du parcours, sans metadonnees

        Raises:
            ScanError: Si le repertoire n'existe pas
        """
        root = directory.expanduser().resolve()
        if not self._file_system.exists(root):
            raise ScanError(f"Repertoire introuvable : {root}")

        logger.info(f"Scan de {root}")
        movies = []
        for file_path in self._file_system.walk_files(root):
            if not self.is_video(file_path):
                continue
            movies.append(self._process_file(file_path))

        logger.info(f"{len(movies)} film(s) trouve(s) dans {root}")
        return movies

    def scan_all(self, directories: Iterable[Path]) -> list[Movie]:
        """Scanne plusieurs repertoires et concatene les resultats."""
        movies: list[Movie] = []
        for directory in directories:
            movies.extend(self.scan(directory))
        return movies

    def is_video(self, file_path: Path) -> bool:
        """Verifie si l'extension du fichier correspond a l'expression configuree."""
        return self._extension_pattern.search(file_path.suffix) is not None

    def _process_file(self, file_path: Path) -> Movie:
        """
        Cree un Movie depuis un fichier video.

        Si aucune expression ne reconnait le nom, le film est tout de meme
        conserve avec le nom du fichier comme titre et sans annee.
        """
        try:
            parsed = self._filename_parser.parse(file_path.stem)
        except FilenameParseError as e:
            logger.warning(str(e))
            return Movie(title=file_path.stem, path=file_path.absolute())

        logger.debug(f"{file_path.name} -> {parsed.title!r} ({parsed.year})")
        return Movie(title=parsed.title, year=parsed.year, path=file_path.absolute())
