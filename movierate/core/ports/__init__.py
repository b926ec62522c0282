"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports client API :
- IMovieInformer : Enrichissement d'un film depuis une API de metadonnees

Ports parsing et systeme de fichiers :
- IFilenameParser : Extraction du titre et de l'annee d'un nom de fichier
- IFileSystem : Parcours des fichiers d'un repertoire
"""

from movierate.core.ports.api_clients import IMovieInformer
from movierate.core.ports.file_system import IFileSystem
from movierate.core.ports.parser import IFilenameParser

__all__ = [
    "IMovieInformer",
    "IFilenameParser",
    "IFileSystem",
]
