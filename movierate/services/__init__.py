"""
Couche application : orchestration du pipeline scan -> enrichissement -> tri.

- ScannerService : parcours des repertoires et parsing des noms de fichiers
- EnricherService : interrogation concurrente de l'API de metadonnees
- LibraryService : agregation, tri et conservation en memoire de la liste
"""

from movierate.services.enricher import EnricherService, EnrichmentStats
from movierate.services.library import LibraryService
from movierate.services.scanner import ScannerService

__all__ = [
    "EnricherService",
    "EnrichmentStats",
    "LibraryService",
    "ScannerService",
]
