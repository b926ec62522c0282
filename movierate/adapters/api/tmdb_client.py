"""
Client TMDB pour l'enrichissement des films.

Implemente IMovieInformer pour TMDB (The Movie Database) en deux requetes :
une recherche par titre/annee, puis les details du premier resultat avec
les credits (realisateur et acteurs principaux).

Usage:
    informer = TMDBInformer(api_key="your_key")
    movie = await informer.fetch(Movie(title="Avatar", year=2009))
    await informer.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from movierate.core.entities.movie import Movie
from movierate.core.ports.api_clients import IMovieInformer


class TMDBInformer(IMovieInformer):
    """
    Client API TMDB.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters)
        MAX_CAST: Nombre d'acteurs conserves
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
    MAX_CAST = 4

    def __init__(self, api_key: str, language: str = "fr-FR", timeout: float = 30.0) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API v3 ou Read Access Token v4
            language: Langue des resumes et genres
            timeout: Delai maximal d'une requete en secondes
        """
        self._api_key = api_key
        self._language = language
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def fetch(self, movie: Movie) -> Movie:
        """
        Recherche le film puis recupere ses details.

        Args:
            movie: Film issu du scan

        Returns:
            Le film enrichi, ou sa version nue si aucun resultat ou en cas d'erreur
        """
        try:
            tmdb_id = await self._search(movie.title, movie.year)
            if tmdb_id is None:
                logger.info(f"Film '{movie.title}' non trouve sur TMDB")
                return movie.bare()
            data = await self._get_details(tmdb_id)
            if data is not None:
                return self._to_movie(movie, data)
        except httpx.HTTPError as e:
            logger.error(f"Erreur TMDB pour '{movie.title}' : {e}")
            return movie.bare()
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Reponse TMDB illisible pour '{movie.title}' : {e}")
            return movie.bare()

        logger.info(f"Details TMDB introuvables pour '{movie.title}' (id {tmdb_id})")
        return movie.bare()

    async def _search(self, query: str, year: Optional[int]) -> Optional[str]:
        """Retourne l'ID TMDB du premier resultat de recherche."""
        params: dict[str, Any] = {
            "query": query,
            "language": self._language,
            "include_adult": "false",
        }
        if year:
            params["year"] = year

        logger.debug(f"Recherche TMDB : {query!r} ({year})")
        response = await self._get_client().get("/search/movie", params=params)
        response.raise_for_status()
        results = response.json().get("results") or []
        if not results:
            return None
        return str(results[0]["id"])

    async def _get_details(self, tmdb_id: str) -> Optional[dict[str, Any]]:
        """Recupere les details d'un film avec ses credits, None si 404."""
        response = await self._get_client().get(
            f"/movie/{tmdb_id}",
            params={"language": self._language, "append_to_response": "credits"},
        )
        if response.status_code == 404:
            return None
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise TypeError(f"details TMDB inattendus : {type(data).__name__}")
        return data

    def _to_movie(self, movie: Movie, data: dict[str, Any]) -> Movie:
        """Convertit la reponse JSON des details TMDB en Movie."""
        genres = [genre["name"] for genre in (data.get("genres") or []) if genre.get("name")]

        poster_path = data.get("poster_path")
        poster_url = f"{self.TMDB_IMAGE_BASE_URL}{poster_path}" if poster_path else None

        runtime_minutes = data.get("runtime")
        runtime = f"{runtime_minutes} min" if runtime_minutes else None

        # Realisateur depuis l'equipe technique
        director = None
        credits_data = data.get("credits") or {}
        for crew_member in credits_data.get("crew") or []:
            if crew_member.get("job") == "Director":
                director = crew_member.get("name")
                break

        cast_list = (credits_data.get("cast") or [])[: self.MAX_CAST]
        cast = [actor["name"] for actor in cast_list if actor.get("name")]

        return Movie(
            title=movie.title,
            year=movie.year,
            path=movie.path,
            genres=genres,
            imdb_id=data.get("imdb_id") or None,
            runtime=runtime,
            votes=data.get("vote_count"),
            rating=data.get("vote_average"),
            plot=data.get("overview") or None,
            poster_url=poster_url,
            cast=cast,
            director=director,
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
