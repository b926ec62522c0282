"""
Informateur sans API : renvoie les films tels qu'issus du scan.

Utilise quand aucun fournisseur n'est configure, quand le fournisseur est
inconnu ou quand sa cle API manque.
"""

from movierate.core.entities.movie import Movie
from movierate.core.ports.api_clients import IMovieInformer


class EmptyInformer(IMovieInformer):
    """Implementation de IMovieInformer qui ne fait aucun appel reseau."""

    @property
    def source(self) -> str:
        return "none"

    async def fetch(self, movie: Movie) -> Movie:
        return movie.bare()
