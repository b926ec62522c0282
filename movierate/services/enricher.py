"""
Service d'enrichissement des films via API.

Lance une recherche par film, toutes en parallele, et attend qu'elles soient
toutes terminees. Il n'y a ni limite de concurrence, ni nouvelle tentative :
une recherche en echec donne un film sans metadonnees.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from movierate.core.entities.movie import Movie
from movierate.core.ports.api_clients import IMovieInformer


@dataclass
class EnrichmentStats:
    """Resultat d'un enrichissement.

    Attributes:
        enriched: Nombre de films avec au moins une metadonnee
        bare: Nombre de films sans metadonnees (non trouves ou erreur)
    """

    enriched: int = 0
    bare: int = 0

    @property
    def total(self) -> int:
        """Nombre total de films traites."""
        return self.enriched + self.bare

    @classmethod
    def from_movies(cls, movies: list[Movie]) -> "EnrichmentStats":
        enriched = sum(1 for movie in movies if movie.is_enriched)
        return cls(enriched=enriched, bare=len(movies) - enriched)


class EnricherService:
    """
    Service d'enrichissement des metadonnees.

    Example:
        enricher = EnricherService(informer=OMDbInformer(api_key="xxx"))
        movies = await enricher.enrich(scanned_movies)
    """

    def __init__(self, informer: IMovieInformer) -> None:
        """
        Initialise le service d'enrichissement.

        Args:
            informer: Source de metadonnees (OMDb, TMDB ou vide)
        """
        self._informer = informer

    @property
    def source(self) -> str:
        return self._informer.source

    async def enrich(
        self,
        movies: list[Movie],
        on_done: Optional[Callable[[Movie], None]] = None,
    ) -> list[Movie]:
        """
        Enrichit tous les films en parallele.

        Args:
            movies: Films issus du scan
            on_done: Callback appele a la fin de chaque recherche (optionnel)

        Returns:
            Films enrichis, dans le meme ordre que l'entree
        """
        if not movies:
            return []

        logger.info(f"Enrichissement de {len(movies)} film(s) via {self.source}")

        async def fetch_one(movie: Movie) -> Movie:
            try:
                result = await self._informer.fetch(movie)
            except Exception as e:
                logger.error(f"Echec de l'enrichissement de '{movie.title}' : {e}")
                result = movie.bare()
            if on_done:
                on_done(result)
            return result

        results = await asyncio.gather(*(fetch_one(movie) for movie in movies))

        stats = EnrichmentStats.from_movies(results)
        logger.info(f"Enrichissement termine : {stats.enriched} enrichi(s), {stats.bare} sans metadonnees")
        return list(results)
