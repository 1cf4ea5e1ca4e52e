import logging
from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from ..core.config import get_settings
from ..core.repository import RecipeRepository
from ..models.recipe import Recipe
from ..views.recipe_view import RecipeDisplay, RecipeView

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/recipes")


class RepositoryStatus(BaseModel):
    count: int
    is_modified: bool
    path: str


@lru_cache()
def get_repository() -> RecipeRepository:
    """Return the process-wide repository built from settings."""
    settings = get_settings()
    return RecipeRepository(settings.path, save_mode=settings.save_mode, encoding=settings.encoding)


def repository_status(repo: RecipeRepository) -> RepositoryStatus:
    return RepositoryStatus(count=len(repo), is_modified=repo.is_modified, path=str(repo.path))


@router.get("", response_model=List[Recipe])
async def list_recipes(repo: RecipeRepository = Depends(get_repository)):
    return repo.get_all()


@router.get("/status", response_model=RepositoryStatus)
async def status(repo: RecipeRepository = Depends(get_repository)):
    return repository_status(repo)


@router.post("/load", response_model=RepositoryStatus)
def load(repo: RecipeRepository = Depends(get_repository)):
    repo.load()
    return repository_status(repo)


@router.post("/save", response_model=RepositoryStatus)
def save(repo: RecipeRepository = Depends(get_repository)):
    repo.save()
    return repository_status(repo)


@router.get("/view", response_model=List[RecipeDisplay])
async def view_recipes(repo: RecipeRepository = Depends(get_repository)):
    return RecipeView.render_all(repo.get_all())


@router.get("/{index}", response_model=Recipe)
async def get_recipe(index: int, repo: RecipeRepository = Depends(get_repository)):
    return repo.get_at(index)


@router.get("/{index}/view", response_model=RecipeDisplay)
async def view_recipe(index: int, repo: RecipeRepository = Depends(get_repository)):
    return RecipeView.render(repo.get_at(index))


@router.get("/{index}/lines", response_model=List[str])
async def recipe_lines(index: int, repo: RecipeRepository = Depends(get_repository)):
    return RecipeView.to_lines(RecipeView.render(repo.get_at(index)))


@router.delete("/{index}", status_code=204)
async def delete_recipe(index: int, repo: RecipeRepository = Depends(get_repository)):
    repo.delete_at(index)
    return Response(status_code=204)
