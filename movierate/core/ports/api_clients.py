"""
Interface port pour les clients d'API de metadonnees films.

Les implementations (adaptateurs) interrogent OMDb ou TMDB ; l'informateur
vide ne fait aucun appel et renvoie le film tel quel.
"""

from abc import ABC, abstractmethod

from movierate.core.entities.movie import Movie


class IMovieInformer(ABC):
    """
    Interface de base des sources de metadonnees films.

    Contrat : fetch() ne leve jamais d'exception pour un echec de recherche.
    Une erreur reseau, HTTP ou de format est journalisee et le film est
    renvoye sans metadonnees (titre, annee et chemin uniquement).
    """

    @abstractmethod
    async def fetch(self, movie: Movie) -> Movie:
        """
        Recupere les metadonnees d'un film.

        Args :
            movie : Film issu du scan (titre, annee, chemin)

        Retourne :
            Une copie enrichie du film, ou sa version nue si la recherche echoue
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'omdb', 'tmdb')."""
        ...

    async def close(self) -> None:
        """Libere les ressources reseau eventuelles."""
        return None
