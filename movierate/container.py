"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from movierate.adapters.api.registry import select_informer
from movierate.adapters.file_system import FileSystemAdapter
from movierate.adapters.parsing.regex_parser import RegexFilenameParser
from movierate.config import Settings, load_movie_config
from movierate.services.enricher import EnricherService
from movierate.services.library import LibraryService
from movierate.services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        library = container.library_service()
        await library.refresh([Path("~/Films")])

    La configuration JSON (movie_config) est un Singleton : apres une
    sauvegarde depuis la page de reglages, appeler container.movie_config.reset()
    pour relire le fichier.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Configuration JSON du scan et de l'API (userConfig.json ou config.json)
    movie_config = providers.Singleton(load_movie_config, settings=config)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    filename_parser = providers.Singleton(RegexFilenameParser, config=movie_config)

    # Client API selectionne par MovieAPI - Singleton pour partager le client HTTP
    informer = providers.Singleton(
        select_informer,
        name=movie_config.provided.movie_api,
        api_key=movie_config.provided.api_key,
    )

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        filename_parser=filename_parser,
        movie_config=movie_config,
    )
    enricher_service = providers.Factory(
        EnricherService,
        informer=informer,
    )

    # Bibliotheque - Singleton car elle conserve la liste des films en memoire
    library_service = providers.Singleton(
        LibraryService,
        scanner=scanner_service,
        enricher=enricher_service,
    )
