"""
Route de la page de reglages.

Affiche et permet de modifier la configuration JSON du scan et de l'API
(expressions regulieres, fournisseur, cle API). Les modifications sont
ecrites dans le fichier utilisateur (userConfig.json).
"""

from typing import Any

from fastapi import APIRouter, Request
from loguru import logger
from pydantic import ValidationError

from movierate.config import SUPPORTED_APIS, MovieConfig, save_movie_config
from movierate.web.deps import get_container, templates

router = APIRouter()

_MASK = "••••"

# Cle JSON -> nom du champ du formulaire
_ALIAS_TO_FIELD = {
    field.alias: name for name, field in MovieConfig.model_fields.items() if field.alias
}


def _mask_secret(value: str | None) -> str:
    """Masque une cle API en ne montrant que les 4 derniers caracteres."""
    if not value:
        return ""
    if len(value) <= 4:
        return _MASK
    return _MASK + value[-4:]


def _form_values(config: MovieConfig) -> dict[str, str]:
    """Valeurs affichees dans le formulaire pour une configuration."""
    return {
        "name_parser_expressions": "\n".join(config.name_parser_expressions),
        "title_cleanup_expression": config.title_cleanup_expression,
        "extension_expression": config.extension_expression,
        "api_key": _mask_secret(config.api_key),
        "movie_api": config.movie_api,
    }


def _parse_form(form_data: dict[str, Any], current: MovieConfig) -> dict[str, Any]:
    """Construit le dictionnaire JSON (cles d'origine) depuis le formulaire."""
    expressions = [
        line.strip()
        for line in str(form_data.get("name_parser_expressions", "")).splitlines()
        if line.strip()
    ]

    # Cle masquee ou vide : l'utilisateur n'a pas modifie la cle
    api_key = str(form_data.get("api_key", "")).strip()
    if not api_key or api_key.startswith(_MASK):
        api_key = current.api_key

    return {
        "NameParserExpression": expressions,
        "TitleCleanupExpression": str(form_data.get("title_cleanup_expression", "")),
        "ExtensionExpression": str(form_data.get("extension_expression", "")),
        "APIKey": api_key,
        "MovieAPI": str(form_data.get("movie_api", "")).strip().lower(),
    }


def _collect_errors(error: ValidationError) -> dict[str, str]:
    """Retourne un message d'erreur par champ du formulaire."""
    errors: dict[str, str] = {}
    for item in error.errors():
        loc = item.get("loc") or ("",)
        key = _ALIAS_TO_FIELD.get(str(loc[0]), str(loc[0]))
        message = item.get("msg", "Valeur invalide").removeprefix("Value error, ")
        errors.setdefault(key, message)
    return errors


def _render(request: Request, context: dict[str, Any], status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "settings.html",
        {"apis": SUPPORTED_APIS, "errors": {}, "success": False, **context},
        status_code=status_code,
    )


def _render_errors(
    request: Request, form_data: dict[str, Any], current: MovieConfig, errors: dict[str, str]
):
    """Reaffiche le formulaire saisi avec les erreurs, sans rien ecrire."""
    logger.info(f"Reglages refuses : {errors}")
    values = {**form_data, "api_key": _mask_secret(current.api_key)}
    return _render(request, {"values": values, "errors": errors}, status_code=422)


@router.get("/settings")
async def settings_page(request: Request):
    """Affiche la page de reglages."""
    config = get_container(request).movie_config()
    return _render(request, {"values": _form_values(config)})


@router.post("/settings")
async def settings_save(request: Request):
    """Valide puis sauvegarde la configuration dans le fichier utilisateur."""
    container = get_container(request)
    current = container.movie_config()
    form_data = dict(await request.form())

    raw = _parse_form(form_data, current)
    if raw["MovieAPI"] not in SUPPORTED_APIS:
        errors = {"movie_api": f"Fournisseur inconnu : {raw['MovieAPI'] or '(vide)'}"}
        return _render_errors(request, form_data, current, errors)

    try:
        new_config = MovieConfig.model_validate(raw)
    except ValidationError as e:
        return _render_errors(request, form_data, current, _collect_errors(e))

    user_config_file = container.config().user_config_file
    try:
        save_movie_config(new_config, user_config_file)
    except OSError as e:
        logger.error(f"Ecriture impossible de {user_config_file} : {e}")
        errors = {"form": f"Impossible d'ecrire {user_config_file} : {e.strerror or e}"}
        return _render_errors(request, form_data, current, errors)
    container.movie_config.reset()

    return _render(request, {"values": _form_values(new_config), "success": True})
