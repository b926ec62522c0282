"""
Dependances partagees de l'application web.

Fournit les templates Jinja2 utilisees par toutes les routes et l'acces
au container DI attache a l'application.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from movierate import __version__
from movierate.container import Container

_WEB_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version disponible dans tous les templates
templates.env.globals["app_version"] = f"MovieRate v{__version__}"


def get_container(request: Request) -> Container:
    """Retourne le container DI initialise au demarrage de l'application."""
    return request.app.state.container
