"""
Objet valeur pour les informations extraites d'un nom de fichier video.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedFilename:
    """
    Titre et annee extraits du nom d'un fichier video.

    Attributs:
        title: Titre nettoye (peut etre vide si le nom l'est)
        year: Annee de sortie, None si absente du nom
    """

    title: str
    year: Optional[int] = None
