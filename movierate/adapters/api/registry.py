"""
Selection de l'informateur a partir du nom de fournisseur configure.
"""

from loguru import logger

from movierate.adapters.api.empty_informer import EmptyInformer
from movierate.adapters.api.omdb_client import OMDbInformer
from movierate.adapters.api.tmdb_client import TMDBInformer
from movierate.core.ports.api_clients import IMovieInformer

_INFORMERS = {
    "omdb": OMDbInformer,
    "tmdb": TMDBInformer,
}


def select_informer(name: str, api_key: str) -> IMovieInformer:
    """
    Retourne l'informateur correspondant au fournisseur configure.

    Args:
        name: Nom du fournisseur (MovieAPI dans la configuration JSON)
        api_key: Cle API du fournisseur

    Returns:
        OMDbInformer ou TMDBInformer si le fournisseur est connu et la cle
        renseignee, EmptyInformer sinon
    """
    informer_class = _INFORMERS.get(name.strip().lower())
    if informer_class is None:
        logger.info(f"Fournisseur '{name}' sans client API, aucun enrichissement")
        return EmptyInformer()

    if not api_key:
        logger.warning(f"Cle API manquante pour '{name}', aucun enrichissement")
        return EmptyInformer()

    return informer_class(api_key=api_key)
