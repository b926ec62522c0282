"""
Interface port pour le parsing de noms de fichiers video.
"""

from abc import ABC, abstractmethod

from movierate.core.value_objects.parsed_info import ParsedFilename


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers video.

    Definit le contrat pour extraire le titre et l'annee depuis un nom
    de fichier (sans le chemin ni l'extension).
    """

    @abstractmethod
    def parse(self, name: str) -> ParsedFilename:
        """
        Parse un nom de fichier et extrait titre et annee.

        Args:
            name: Nom du fichier sans chemin ni extension

        Retourne:
            ParsedFilename avec les informations extraites

        Raises:
            FilenameParseError: Si aucune expression ne correspond
        """
        ...
