"""
Client OMDb pour l'enrichissement des films.

Implemente IMovieInformer pour OMDb (Open Movie Database) : une seule requete
par film, par titre et annee. Un film introuvable ou une erreur reseau
renvoie le film sans metadonnees.

Usage:
    informer = OMDbInformer(api_key="your_key")
    movie = await informer.fetch(Movie(title="Joker", year=2019))
    await informer.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from movierate.core.entities.movie import Movie
from movierate.core.ports.api_clients import IMovieInformer

# Valeur renvoyee par OMDb pour un champ inconnu
_NOT_AVAILABLE = "N/A"


class OMDbInformer(IMovieInformer):
    """
    Client API OMDb.

    Attributes:
        OMDB_BASE_URL: URL de l'API OMDb

    Example:
        informer = OMDbInformer(api_key="xxx")
        movie = await informer.fetch(Movie(title="Inception", year=2010))
        print(f"{movie.title} - {movie.rating}/10 ({movie.votes} votes)")
        await informer.close()
    """

    OMDB_BASE_URL = "http://www.omdbapi.com/"

    def __init__(self, api_key: str, timeout: float = 30.0) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb
            timeout: Delai maximal d'une requete en secondes
        """
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "omdb"

    async def fetch(self, movie: Movie) -> Movie:
        """
        Recherche un film par titre (et annee si connue).

        Args:
            movie: Film issu du scan

        Returns:
            Le film enrichi, ou sa version nue si OMDb ne le trouve pas
        """
        params: dict[str, Any] = {"apikey": self._api_key, "t": movie.title}
        if movie.year:
            params["y"] = movie.year

        logger.debug(f"Requete OMDb : t={movie.title!r} y={movie.year}")
        try:
            response = await self._get_client().get(self.OMDB_BASE_URL, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Erreur OMDb pour '{movie.title}' : {e}")
            return movie.bare()
        except ValueError as e:
            logger.error(f"Reponse OMDb illisible pour '{movie.title}' : {e}")
            return movie.bare()

        if not isinstance(data, dict):
            logger.error(f"Reponse OMDb inattendue pour '{movie.title}' : {type(data).__name__}")
            return movie.bare()

        if data.get("Response") != "True":
            logger.info(f"Film '{movie.title}' non trouve : {data.get('Error', 'inconnu')}")
            return movie.bare()

        return self._to_movie(movie, data)

    def _to_movie(self, movie: Movie, data: dict[str, Any]) -> Movie:
        """Convertit la reponse JSON OMDb en Movie."""
        return Movie(
            title=movie.title,
            year=movie.year,
            path=movie.path,
            genres=_split_list(data.get("Genre")),
            imdb_id=_value(data.get("imdbID")),
            runtime=_value(data.get("Runtime")),
            votes=_parse_votes(data.get("imdbVotes")),
            rating=_parse_rating(data.get("imdbRating")),
            plot=_value(data.get("Plot")),
            poster_url=_value(data.get("Poster")),
            cast=_split_list(data.get("Actors")),
            director=_value(data.get("Director")),
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()


def _value(raw: Any) -> Optional[str]:
    """Retourne None pour un champ absent, vide ou "N/A"."""
    if raw is None:
        return None
    raw = str(raw).strip()
    if not raw or raw == _NOT_AVAILABLE:
        return None
    return raw


def _split_list(raw: Any) -> list[str]:
    """Decoupe une liste separee par des virgules ("Drama, Crime")."""
    value = _value(raw)
    if value is None:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_rating(raw: Any) -> Optional[float]:
    value = _value(raw)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _parse_votes(raw: Any) -> Optional[int]:
    """Convertit "1,234,567" en 1234567."""
    value = _value(raw)
    if value is None:
        return None
    try:
        return int(value.replace(",", ""))
    except ValueError:
        return None
