"""
Application FastAPI de MovieRate.

Construit l'application web autour du Container DI, scanne et enrichit
la bibliotheque au demarrage, configure les fichiers statiques et monte
les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Sequence

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger

from movierate.container import Container
from movierate.web.routes.home import router as home_router
from movierate.web.routes.settings import router as settings_router

_WEB_DIR = Path(__file__).parent


def create_app(container: Container, directories: Sequence[Path]) -> FastAPI:
    """
    Cree l'application web.

    Args:
        container: Container DI deja configure
        directories: Repertoires de films scannes au demarrage

    Returns:
        Application FastAPI prete a etre servie par uvicorn
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Construit la bibliotheque au demarrage et ferme le client API a l'arret."""
        app.state.container = container
        app.state.directories = list(directories)
        library = container.library_service()
        await library.refresh(app.state.directories)
        logger.info(f"Serveur pret : {len(library.movies)} film(s)")
        yield
        await container.informer().close()

    app = FastAPI(title="MovieRate", lifespan=lifespan)

    # Fichiers statiques
    app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

    # Routes
    app.include_router(home_router)
    app.include_router(settings_router)

    return app
