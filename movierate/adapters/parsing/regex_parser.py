"""
Parser de noms de fichiers base sur des expressions regulieres configurables.

Implementation de IFilenameParser : les expressions viennent de MovieConfig
et sont essayees dans l'ordre. La premiere qui correspond fournit le titre
(groupe 1) et, si elle en a un, l'annee (groupe 2).
"""

import re
from typing import Optional

from loguru import logger

from movierate.config import MovieConfig
from movierate.core.ports.parser import IFilenameParser
from movierate.core.value_objects.parsed_info import ParsedFilename
from movierate.exceptions import FilenameParseError


class RegexFilenameParser(IFilenameParser):
    """
    Extrait titre et annee d'un nom de fichier.

    Example:
        parser = RegexFilenameParser(config)
        parser.parse("Joker.(2019).[Bluray].[1080p]")
        # ParsedFilename(title="Joker", year=2019)
    """

    def __init__(self, config: MovieConfig) -> None:
        self._parsers = config.name_parsers
        self._cleanup = config.title_cleanup

    def parse(self, name: str) -> ParsedFilename:
        """
        Parse un nom de fichier (sans extension).

        Le titre capture est nettoye : chaque correspondance de l'expression
        de nettoyage devient un espace, puis les espaces sont normalises.

        Raises:
            FilenameParseError: Si aucune expression ne correspond
        """
        for pattern in self._parsers:
            match = pattern.search(name)
            if match is None:
                logger.debug(f"Pas de correspondance pour '{name}' avec {pattern.pattern}")
                continue

            title = self._clean_title(match.group(1) or "")
            year = self._extract_year(match, name)
            return ParsedFilename(title=title, year=year)

        raise FilenameParseError(name)

    def _clean_title(self, raw_title: str) -> str:
        cleaned = self._cleanup.sub(" ", raw_title)
        return " ".join(cleaned.split())

    @staticmethod
    def _extract_year(match: re.Match[str], name: str) -> Optional[int]:
        """Annee depuis le groupe 2, None si le groupe est absent ou vide."""
        if match.re.groups < 2:
            return None
        year_text = match.group(2)
        if not year_text:
            return None
        try:
            return int(year_text)
        except ValueError:
            logger.warning(f"Annee illisible '{year_text}' dans '{name}'")
            return None
