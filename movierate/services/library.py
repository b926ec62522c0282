"""
Service de bibliotheque : agrege le scan et l'enrichissement.

Conserve en memoire la derniere liste de films, triee par titre, servie
par l'interface web.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from movierate.core.entities.movie import Movie
from movierate.services.enricher import EnricherService, EnrichmentStats
from movierate.services.scanner import ScannerService


class LibraryService:
    """
    Pipeline complet : scan -> enrichissement -> tri par titre.

    Example:
        library = LibraryService(scanner=scanner, enricher=enricher)
        await library.refresh([Path("~/Films")])
        for movie in library.movies:
            print(movie.title, movie.rating)
    """

    def __init__(self, scanner: ScannerService, enricher: EnricherService) -> None:
        self._scanner = scanner
        self._enricher = enricher
        self._movies: list[Movie] = []
        self._stats = EnrichmentStats()

    @property
    def movies(self) -> list[Movie]:
        """Liste courante des films, triee par titre."""
        return list(self._movies)

    @property
    def stats(self) -> EnrichmentStats:
        """Compteurs du dernier rafraichissement."""
        return self._stats

    async def refresh(
        self,
        directories: Iterable[Path],
        on_done: Optional[Callable[[Movie], None]] = None,
        on_scanned: Optional[Callable[[int], None]] = None,
    ) -> list[Movie]:
        """
        Reconstruit la liste des films.

        Args:
            directories: Repertoires a scanner
            on_done: Callback de progression transmis a l'enrichissement
            on_scanned: Callback recevant le nombre de films trouves par le scan

        Returns:
            La nouvelle liste, triee par titre

        Raises:
            ScanError: Si un repertoire n'existe pas
        """
        scanned = self._scanner.scan_all(directories)
        if on_scanned:
            on_scanned(len(scanned))
        enriched = await self._enricher.enrich(scanned, on_done=on_done)
        enriched.sort(key=lambda movie: movie.title)

        self._movies = enriched
        self._stats = EnrichmentStats.from_movies(enriched)
        logger.info(f"Bibliotheque : {len(enriched)} film(s)")
        return self.movies
