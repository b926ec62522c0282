"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem utilisee par le scanner.
"""

import os
from pathlib import Path
from typing import Iterator

from loguru import logger

from movierate.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Le parcours suit l'ordre alphabetique dans chaque repertoire pour que
    deux scans successifs produisent le meme resultat.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def walk_files(self, directory: Path) -> Iterator[Path]:
        """
        Parcourt recursivement un repertoire et yield chaque fichier.

        Les repertoires illisibles sont journalises puis ignores.
        Les liens symboliques vers des repertoires ne sont pas suivis.
        """

        def on_error(error: OSError) -> None:
            logger.warning(f"Impossible de parcourir {error.filename} : {error.strerror}")

        for root, dirs, files in os.walk(directory, onerror=on_error):
            dirs.sort()
            root_path = Path(root)
            for filename in sorted(files):
                path = root_path / filename
                if path.is_file():
                    yield path
