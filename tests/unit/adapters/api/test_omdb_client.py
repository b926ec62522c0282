"""
Tests pour OMDbInformer.

Utilise respx pour simuler les appels httpx et verifie :
- Les parametres envoyes (cle, titre, annee)
- La conversion de la reponse en Movie (valeurs "N/A" ignorees)
- Le retour d'un film sans metadonnees en cas d'echec
"""

from pathlib import Path

import httpx
import pytest
import respx

from movierate.adapters.api.omdb_client import OMDbInformer
from movierate.core.entities.movie import Movie
from movierate.core.ports.api_clients import IMovieInformer
from tests.fixtures.omdb_responses import (
    OMDB_MOVIE_RESPONSE,
    OMDB_MOVIE_RESPONSE_NOT_AVAILABLE,
    OMDB_NOT_FOUND_RESPONSE,
)

OMDB_URL = "http://www.omdbapi.com/"


@pytest.fixture
def informer() -> OMDbInformer:
    return OMDbInformer(api_key="test_api_key")


@pytest.fixture
def joker() -> Movie:
    return Movie(title="Joker", year=2019, path=Path("/films/Joker (2019).mkv"))


class TestOMDbInformerInterface:
    """Test OMDbInformer implemente IMovieInformer."""

    def test_implements_interface(self, informer: OMDbInformer) -> None:
        assert isinstance(informer, IMovieInformer)

    def test_source(self, informer: OMDbInformer) -> None:
        assert informer.source == "omdb"


class TestOMDbFetch:
    """Tests de OMDbInformer.fetch()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_sends_key_title_and_year(self, informer: OMDbInformer, joker: Movie) -> None:
        route = respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_MOVIE_RESPONSE)
        )

        await informer.fetch(joker)

        params = route.calls.last.request.url.params
        assert params["apikey"] == "test_api_key"
        assert params["t"] == "Joker"
        assert params["y"] == "2019"

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_year_parameter_without_year(self, informer: OMDbInformer) -> None:
        route = respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_MOVIE_RESPONSE)
        )

        await informer.fetch(Movie(title="Joker"))

        assert "y" not in route.calls.last.request.url.params

    @pytest.mark.asyncio
    @respx.mock
    async def test_maps_response_fields(self, informer: OMDbInformer, joker: Movie) -> None:
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, json=OMDB_MOVIE_RESPONSE))

        movie = await informer.fetch(joker)

        # Titre, annee et chemin viennent du scan, pas de l'API
        assert movie.title == "Joker"
        assert movie.year == 2019
        assert movie.path == joker.path
        assert movie.genres == ["Crime", "Drama", "Thriller"]
        assert movie.imdb_id == "tt7286456"
        assert movie.imdb_url == "https://www.imdb.com/title/tt7286456/"
        assert movie.runtime == "122 min"
        assert movie.votes == 1484275
        assert movie.rating == 8.4
        assert movie.plot.startswith("Arthur Fleck")
        assert movie.poster_url == "https://m.media-amazon.com/images/M/joker.jpg"
        assert movie.cast == ["Joaquin Phoenix", "Robert De Niro", "Zazie Beetz"]
        assert movie.director == "Todd Phillips"
        assert movie.is_enriched

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_available_values(self, informer: OMDbInformer) -> None:
        """Les champs "N/A" deviennent vides."""
        respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_MOVIE_RESPONSE_NOT_AVAILABLE)
        )

        movie = await informer.fetch(Movie(title="Obscure Short", year=2003))

        assert movie.genres == ["Short"]
        assert movie.imdb_id == "tt0999999"
        assert movie.runtime is None
        assert movie.rating is None
        assert movie.votes is None
        assert movie.plot is None
        assert movie.poster_url is None
        assert movie.cast == []
        assert movie.director is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_found_returns_bare_movie(
        self, informer: OMDbInformer, joker: Movie
    ) -> None:
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, json=OMDB_NOT_FOUND_RESPONSE))

        movie = await informer.fetch(joker)

        assert movie == joker.bare()
        assert not movie.is_enriched

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_returns_bare_movie(
        self, informer: OMDbInformer, joker: Movie
    ) -> None:
        respx.get(OMDB_URL).mock(return_value=httpx.Response(500))

        assert await informer.fetch(joker) == joker.bare()

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error_returns_bare_movie(
        self, informer: OMDbInformer, joker: Movie
    ) -> None:
        respx.get(OMDB_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

        assert await informer.fetch(joker) == joker.bare()

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json_returns_bare_movie(
        self, informer: OMDbInformer, joker: Movie
    ) -> None:
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        assert await informer.fetch(joker) == joker.bare()


class TestOMDbClose:
    """Tests de la fermeture du client HTTP."""

    @pytest.mark.asyncio
    async def test_close_without_request(self, informer: OMDbInformer) -> None:
        await informer.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_client_recreated_after_close(
        self, informer: OMDbInformer, joker: Movie
    ) -> None:
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, json=OMDB_MOVIE_RESPONSE))

        await informer.fetch(joker)
        await informer.close()
        movie = await informer.fetch(joker)

        assert movie.rating == 8.4


class TestOMDbMalformedPayloads:
    """Une reponse mal formee donne un film sans metadonnees, sans exception."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_json_array(self, informer: OMDbInformer, joker: Movie) -> None:
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, json=[1]))

        assert await informer.fetch(joker) == joker.bare()

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_string_fields(self, informer: OMDbInformer, joker: Movie) -> None:
        """Des champs numeriques ou null sont toleres."""
        payload = {
            **OMDB_MOVIE_RESPONSE,
            "imdbRating": 8.4,
            "imdbVotes": 1484275,
            "Genre": None,
            "Actors": None,
        }
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, json=payload))

        movie = await informer.fetch(joker)

        assert movie.rating == 8.4
        assert movie.votes == 1484275
        assert movie.genres == []
        assert movie.cast == []
