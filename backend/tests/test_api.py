import logging

import pytest
from fastapi.testclient import TestClient

from backend.filed_recipes.api.recipes import get_repository
from backend.filed_recipes.core.repository import RecipeRepository
from backend.filed_recipes.main import app

RECIPES = """[Recept]
Våfflor
[Instruktioner]
Grädda.
[Recept]
Pannkakor
[Ingredienser]
2;dl;mjölk
[Instruktioner]
Blanda allt.
"""


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text(RECIPES, encoding="utf-8")
    return path


@pytest.fixture
def repo(recipe_file):
    repo = RecipeRepository(recipe_file)
    repo.load()
    return repo


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["recipes"] == 2


def test_list_recipes(client):
    response = client.get("/api/v1/recipes")
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Pannkakor", "Våfflor"]


def test_get_recipe(client):
    response = client.get("/api/v1/recipes/0")
    assert response.status_code == 200
    assert response.json()["ingredients"] == [{"amount": "2", "measure": "dl", "name": "mjölk"}]


def test_get_recipe_out_of_range(client):
    response = client.get("/api/v1/recipes/2")
    assert response.status_code == 404


def test_view_recipe(client):
    response = client.get("/api/v1/recipes/0/view")
    assert response.status_code == 200
    assert response.json() == {
        "title": "Pannkakor",
        "ingredients": ["2 dl mjölk"],
        "instructions": ["1 Blanda allt."],
    }


def test_delete_and_save(client, repo, recipe_file):
    response = client.delete("/api/v1/recipes/0")
    assert response.status_code == 204
    assert client.get("/api/v1/recipes/status").json()["is_modified"] is True

    response = client.post("/api/v1/recipes/save")
    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert response.json()["is_modified"] is False
    assert recipe_file.read_text(encoding="utf-8") == "[Recept]\nVåfflor\n[Ingredienser]\n[Instruktioner]\nGrädda.\n"


def test_load_malformed_file(client, recipe_file):
    recipe_file.write_text("[Ingredienser]\n2;dl;mjölk\n", encoding="utf-8")
    response = client.post("/api/v1/recipes/load")
    assert response.status_code == 422
    assert response.json()["line_number"] == 2


def test_load_missing_file(client, recipe_file):
    recipe_file.unlink()
    response = client.post("/api/v1/recipes/load")
    assert response.status_code == 503
    assert client.get("/api/v1/recipes/status").json()["count"] == 2


def test_view_all_recipes(client):
    response = client.get("/api/v1/recipes/view")
    assert response.status_code == 200
    assert [d["title"] for d in response.json()] == ["Pannkakor", "Våfflor"]


def test_recipe_lines(client):
    response = client.get("/api/v1/recipes/1/lines")
    assert response.status_code == 200
    assert response.json() == [
        "Våfflor",
        "",
        "Ingredienser",
        "============",
        "",
        "Gör såhär:",
        "============",
        "1 Grädda.",
    ]


@pytest.fixture
def startup_client(recipe_file):
    repo = RecipeRepository(recipe_file)
    app.dependency_overrides[get_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


def test_startup_loads_recipes(startup_client):
    with TestClient(app) as client:
        status = client.get("/api/v1/recipes/status").json()
    assert status["count"] == 2
    assert status["is_modified"] is False


def test_startup_logs_malformed_file(startup_client, recipe_file, caplog):
    recipe_file.write_text("[Recept]\nTrasig\n[Ingredienser]\n2;dl\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        with TestClient(app) as client:
            response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["recipes"] == 0
    assert "Could not load recipes on startup" in caplog.text


def test_startup_skips_missing_file(startup_client, recipe_file):
    recipe_file.unlink()
    with TestClient(app) as client:
        response = client.get("/api/v1/recipes/status")
    assert response.status_code == 200
    assert response.json()["count"] == 0
