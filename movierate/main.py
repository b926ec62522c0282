"""
Point d'entree CLI de MovieRate.

Configure le logging et fournit les commandes CLI (serve, scan, info, version).
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from movierate import __version__
from movierate.adapters.cli.commands import PathsArgument, info, scan
from movierate.adapters.cli.helpers import console
from movierate.config import Settings
from movierate.container import Container
from movierate.exceptions import MovieRateError
from movierate.logging_config import configure_logging

app = typer.Typer(
    name="movierate",
    help="Recupere les informations des films presents dans des repertoires",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Afficher les logs de debug"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MovieRate - Catalogue local de films avec notes et metadonnees."""
    log_level = None
    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG"

    configure_logging(Settings(), log_level)


app.command()(scan)
app.command()(info)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieRate v{__version__}")


@app.command()
def serve(
    paths: PathsArgument,
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
) -> None:
    """Scanne les repertoires puis lance le serveur web."""
    import uvicorn

    from movierate.web.app import create_app

    container = Container()
    settings = container.config()
    try:
        # Valider la configuration JSON avant de demarrer le serveur
        container.movie_config()
    except MovieRateError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)

    host = host or settings.host
    port = port or settings.port
    logger.info(f"Demarrage de MovieRate v{__version__}")
    typer.echo(f"Demarrage du serveur sur http://{host}:{port}")
    uvicorn.run(create_app(container, paths), host=host, port=port)


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
