"""
Route de la page d'accueil.

Affiche le tableau des films trie par titre, avec filtre et tri cote client.
"""

from fastapi import APIRouter, Request

from movierate.web.deps import get_container, templates

router = APIRouter()


@router.get("/")
async def home(request: Request):
    """Page d'accueil avec la liste des films."""
    library = get_container(request).library_service()
    movies = library.movies

    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "movies": movies,
            "stats": library.stats,
            "directories": request.app.state.directories,
        },
    )
