"""
Utilitaires partages pour les commandes CLI de MovieRate.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- build_movie_table : tableau Rich des films
"""

from contextlib import contextmanager

from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from movierate.core.entities.movie import Movie

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("movierate")
    try:
        yield
    finally:
        loguru_logger.enable("movierate")


def build_movie_table(movies: list[Movie]) -> Table:
    """Construit le tableau Rich affiche par la commande scan."""
    table = Table(title=f"{len(movies)} film(s)", show_lines=False)
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Note", justify="right", style="yellow")
    table.add_column("Votes", justify="right")
    table.add_column("Genres")
    table.add_column("Duree")
    table.add_column("IMDb", style="dim")

    for movie in movies:
        table.add_row(
            movie.title,
            str(movie.year) if movie.year else "",
            f"{movie.rating:.1f}" if movie.rating is not None else "",
            f"{movie.votes:,}" if movie.votes is not None else "",
            ", ".join(movie.genres),
            movie.runtime or "",
            movie.imdb_id or "",
        )
    return table
