"""
Entite film.

Un Movie est cree vide depuis le parsing du nom de fichier (titre, annee,
chemin), puis complete une seule fois par l'etape d'enrichissement API.
Il n'a pas d'identite propre au-dela de sa position dans la liste en memoire.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class Movie:
    """
    Represente un film trouve sur le disque avec ses metadonnees.

    Attributs :
        title : Titre deduit du nom de fichier
        year : Annee de sortie deduite du nom de fichier (None si absente)
        path : Chemin absolu du fichier video
        genres : Liste des genres
        imdb_id : Identifiant externe IMDb (format ttXXXXXXX)
        runtime : Duree telle que fournie par l'API (ex: "122 min")
        votes : Nombre de votes
        rating : Note moyenne (sur 10)
        plot : Resume de l'intrigue
        poster_url : URL complete de l'affiche
        cast : Acteurs principaux
        director : Realisateur(s)
    """

    title: str
    year: Optional[int] = None
    path: Optional[Path] = None
    genres: list[str] = field(default_factory=list)
    imdb_id: Optional[str] = None
    runtime: Optional[str] = None
    votes: Optional[int] = None
    rating: Optional[float] = None
    plot: Optional[str] = None
    poster_url: Optional[str] = None
    cast: list[str] = field(default_factory=list)
    director: Optional[str] = None

    @property
    def is_enriched(self) -> bool:
        """Indique si l'API a renvoye au moins une metadonnee."""
        return any(
            (
                self.genres,
                self.imdb_id,
                self.runtime,
                self.votes is not None,
                self.rating is not None,
                self.plot,
                self.poster_url,
                self.cast,
                self.director,
            )
        )

    @property
    def imdb_url(self) -> Optional[str]:
        """URL de la fiche IMDb, si l'identifiant est connu."""
        if not self.imdb_id:
            return None
        return f"https://www.imdb.com/title/{self.imdb_id}/"

    def bare(self) -> "Movie":
        """Retourne une copie ne contenant que les informations issues du disque."""
        return Movie(title=self.title, year=self.year, path=self.path)
