"""
Exceptions metier de MovieRate.

Toutes les erreurs levees volontairement par l'application heritent de
MovieRateError pour pouvoir etre interceptees en un seul point (CLI).
"""


class MovieRateError(Exception):
    """Erreur de base de l'application."""


class ConfigurationError(MovieRateError):
    """Fichier de configuration absent, illisible ou invalide."""


class FilenameParseError(MovieRateError):
    """Aucune expression reguliere ne correspond au nom de fichier."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(
            f"Impossible d'extraire titre et annee de '{filename}' "
            "avec les expressions configurees"
        )


class ScanError(MovieRateError):
    """Repertoire de scan inexistant ou inaccessible."""
