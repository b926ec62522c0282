"""
Clients API externes pour l'enrichissement des metadonnees.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- OMDb: Open Movie Database (fournisseur par defaut)
- TMDB: The Movie Database

Les clients implementent IMovieInformer defini dans core/ports/api_clients.py.
"""

from movierate.adapters.api.empty_informer import EmptyInformer
from movierate.adapters.api.omdb_client import OMDbInformer
from movierate.adapters.api.registry import select_informer
from movierate.adapters.api.tmdb_client import TMDBInformer

__all__ = [
    "EmptyInformer",
    "OMDbInformer",
    "TMDBInformer",
    "select_informer",
]
