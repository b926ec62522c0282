"""
Commandes CLI de scan et d'affichage de la configuration.
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from dependency_injector import providers
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from movierate.adapters.api.empty_informer import EmptyInformer
from movierate.adapters.cli.helpers import build_movie_table, console, suppress_loguru
from movierate.container import Container
from movierate.core.entities.movie import Movie
from movierate.exceptions import MovieRateError

PathsArgument = Annotated[
    list[Path],
    typer.Argument(
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Repertoires de films a scanner",
    ),
]


def scan(
    paths: PathsArgument,
    no_fetch: Annotated[
        bool,
        typer.Option("--no-fetch", help="Ne pas interroger l'API de metadonnees"),
    ] = False,
) -> None:
    """Scanne les repertoires, enrichit les films et affiche le tableau."""
    container = Container()
    if no_fetch:
        container.informer.override(providers.Object(EmptyInformer()))

    try:
        movies = asyncio.run(_scan_async(container, paths))
    except MovieRateError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)

    console.print(build_movie_table(movies))
    stats = container.library_service().stats
    console.print(
        f"[green]{stats.enriched}[/green] enrichi(s), "
        f"[yellow]{stats.bare}[/yellow] sans metadonnees"
    )


async def _scan_async(container: Container, paths: list[Path]) -> list[Movie]:
    """Implementation async de la commande scan."""
    library = container.library_service()
    informer = container.informer()

    try:
        with suppress_loguru():
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task(f"[cyan]Enrichissement ({informer.source})...", total=None)

                def on_scanned(count: int) -> None:
                    progress.update(task, total=count)

                def on_done(movie: Movie) -> None:
                    progress.advance(task)

                return await library.refresh(paths, on_done=on_done, on_scanned=on_scanned)
    finally:
        await informer.close()


def info() -> None:
    """Affiche la configuration actuelle."""
    container = Container()
    settings = container.config()
    try:
        movie_config = container.movie_config()
    except MovieRateError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)

    source = (
        settings.user_config_file
        if settings.user_config_file.exists()
        else settings.default_config_file
    )
    typer.echo(f"Fichier de configuration : {source}")
    typer.echo(f"Serveur : {settings.host}:{settings.port}")
    typer.echo(f"Fournisseur API : {movie_config.movie_api}")
    typer.echo(f"Cle API : {'definie' if movie_config.api_key else 'absente'}")
    typer.echo(f"Extensions : {movie_config.extension_expression}")
    typer.echo("Expressions de nom de fichier :")
    for expression in movie_config.name_parser_expressions:
        typer.echo(f"  {expression}")
    typer.echo(f"Nettoyage du titre : {movie_config.title_cleanup_expression}")
    typer.echo(f"Niveau de log : {settings.log_level}")
