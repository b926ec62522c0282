"""
Interface port pour le parcours du systeme de fichiers.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """Operations de lecture du systeme de fichiers utilisees par le scan."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        ...

    @abstractmethod
    def walk_files(self, directory: Path) -> Iterator[Path]:
        """
        Parcourt recursivement un repertoire.

        Args:
            directory: Repertoire racine du parcours

        Yields:
            Chaque fichier regulier trouve sous le repertoire
        """
        ...
