"""
Tests des routes web (accueil et reglages).

L'application est construite autour d'un Container dont les Settings
pointent vers des fichiers temporaires et dont l'informateur ne fait
aucun appel reseau.
"""

import json
from pathlib import Path

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from movierate.adapters.api.empty_informer import EmptyInformer
from movierate.config import Settings
from movierate.container import Container
from movierate.web.app import create_app


@pytest.fixture
def container(test_settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.informer.override(providers.Object(EmptyInformer()))
    return container


@pytest.fixture
def client(container: Container, movies_dir: Path):
    with TestClient(create_app(container, [movies_dir])) as client:
        yield client


def _form(**overrides: str) -> dict[str, str]:
    data = {
        "name_parser_expressions": r"^(.+?)[._ ]((?:19|20)\d{2})" + "\n" + r"^(.+)$",
        "title_cleanup_expression": r"[._]",
        "extension_expression": r"(?i)\.(mkv|mp4)$",
        "movie_api": "tmdb",
        "api_key": "new-key",
    }
    data.update(overrides)
    return data


class TestHomePage:
    """Tests de la page d'accueil."""

    def test_lists_scanned_movies(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "3 films trouvés" in response.text
        for title in ("Amelie", "Joker", "Se7en"):
            assert title in response.text

    def test_movies_sorted_by_title(self, client: TestClient) -> None:
        text = client.get("/").text

        assert text.index("Amelie") < text.index("Joker") < text.index("Se7en")

    def test_static_files(self, client: TestClient) -> None:
        assert client.get("/static/js/functions.js").status_code == 200
        assert client.get("/static/css/style.css").status_code == 200

    def test_empty_library(self, container: Container, tmp_path: Path) -> None:
        empty_dir = tmp_path / "empty"
        empty_dir.mkdir()

        with TestClient(create_app(container, [empty_dir])) as client:
            response = client.get("/")

        assert response.status_code == 200
        assert "0 films trouvés" in response.text


class TestSettingsPage:
    """Tests de la page de reglages."""

    def test_shows_current_config(self, client: TestClient) -> None:
        response = client.get("/settings")

        assert response.status_code == 200
        assert 'value="omdb" selected' in response.text

    def test_api_key_is_masked(
        self, container: Container, test_settings: Settings, movies_dir: Path
    ) -> None:
        config = json.loads(test_settings.default_config_file.read_text(encoding="utf-8"))
        config["APIKey"] = "secretkey1234"
        test_settings.user_config_file.parent.mkdir(parents=True)
        test_settings.user_config_file.write_text(json.dumps(config), encoding="utf-8")

        with TestClient(create_app(container, [movies_dir])) as client:
            response = client.get("/settings")

        assert "secretkey1234" not in response.text
        assert "••••1234" in response.text

    def test_save_valid_config(self, client: TestClient, test_settings: Settings) -> None:
        response = client.post("/settings", data=_form())

        assert response.status_code == 200
        assert "Configuration enregistrée" in response.text
        saved = json.loads(test_settings.user_config_file.read_text(encoding="utf-8"))
        assert saved["NameParserExpression"] == [r"^(.+?)[._ ]((?:19|20)\d{2})", r"^(.+)$"]
        assert saved["MovieAPI"] == "tmdb"
        assert saved["APIKey"] == "new-key"

    def test_save_reloads_config(self, client: TestClient, container: Container) -> None:
        client.post("/settings", data=_form(movie_api="none"))

        assert container.movie_config().movie_api == "none"

    def test_masked_key_is_kept(self, client: TestClient, test_settings: Settings) -> None:
        client.post("/settings", data=_form(api_key="first-secret"))

        client.post("/settings", data=_form(api_key="••••cret"))

        saved = json.loads(test_settings.user_config_file.read_text(encoding="utf-8"))
        assert saved["APIKey"] == "first-secret"

    def test_invalid_regex_is_rejected(self, client: TestClient, test_settings: Settings) -> None:
        """Une expression invalide n'est jamais ecrite."""
        response = client.post("/settings", data=_form(name_parser_expressions="(["))

        assert response.status_code == 422
        assert "Expression reguliere invalide" in response.text
        assert not test_settings.user_config_file.exists()

    def test_unknown_api_is_rejected(self, client: TestClient, test_settings: Settings) -> None:
        response = client.post("/settings", data=_form(movie_api="rt"))

        assert response.status_code == 422
        assert "Fournisseur inconnu" in response.text
        assert not test_settings.user_config_file.exists()

    def test_empty_expression_list_is_rejected(self, client: TestClient) -> None:
        response = client.post("/settings", data=_form(name_parser_expressions="   \n"))

        assert response.status_code == 422

    def test_write_failure_is_reported_in_page(
        self, client: TestClient, container: Container, test_settings: Settings, tmp_path: Path
    ) -> None:
        """Un fichier utilisateur impossible a ecrire n'interrompt pas la page."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        test_settings.user_config_file = blocker / "userConfig.json"

        response = client.post("/settings", data=_form(movie_api="none"))

        assert response.status_code == 422
        assert "ecrire" in response.text
        assert "blocker" in response.text
        assert container.movie_config().movie_api == "omdb"

    def test_unsupported_saved_api_selects_none(
        self, container: Container, test_settings: Settings, movies_dir: Path
    ) -> None:
        """Un fournisseur sans client dans le fichier s'affiche comme "none"."""
        config = json.loads(test_settings.default_config_file.read_text(encoding="utf-8"))
        config["MovieAPI"] = "rt"
        test_settings.user_config_file.parent.mkdir(parents=True)
        test_settings.user_config_file.write_text(json.dumps(config), encoding="utf-8")

        with TestClient(create_app(container, [movies_dir])) as client:
            response = client.get("/settings")

        assert 'value="none" selected' in response.text
        assert 'value="omdb" selected' not in response.text


class TestHomePageFilter:
    """Attributs utilises par le filtre cote client."""

    def test_title_cell_exposes_title_only(self, client: TestClient) -> None:
        text = client.get("/").text

        assert 'data-title="Joker"' in text
        assert 'data-title="Se7en"' in text
