from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from .api.recipes import get_repository, router as recipes_router
from .core.config import get_settings
from .core.errors import FormatError, IndexOutOfRange, StorageUnavailable
from .core.repository import RecipeRepository

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    repo = app.dependency_overrides.get(get_repository, get_repository)()
    if settings.load_on_startup and repo.path.exists():
        try:
            repo.load()
        except (StorageUnavailable, FormatError) as e:
            log.error(f"Could not load recipes on startup: {e}")
    else:
        log.info(f"No recipe file loaded on startup ({repo.path})")
    yield


app = FastAPI(title="filed-recipes", version="0.1.0", description="Recipes kept in a section-tagged text file", lifespan=lifespan)


@app.exception_handler(StorageUnavailable)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
    return JSONResponse(status_code=503, content={"detail": str(exc), "path": str(exc.path)})


@app.exception_handler(FormatError)
async def format_error_handler(request: Request, exc: FormatError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "line_number": exc.line_number, "line": exc.line},
    )


@app.exception_handler(IndexOutOfRange)
async def index_out_of_range_handler(request: Request, exc: IndexOutOfRange):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


app.include_router(recipes_router)

@app.get("/api/health")
async def health_check(repo: RecipeRepository = Depends(get_repository)):
    return {"status": "ok", "message": "filed-recipes API is running", "recipes": len(repo)}
