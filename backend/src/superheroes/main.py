"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from superheroes.config import get_data_path, settings
from superheroes.api.routes.superheroes import router as superheroes_router
from superheroes.exceptions import DataLoadError, HeroNotFoundError, InvalidArgumentError
from superheroes.repositories.hero_repository import HeroRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    if not hasattr(app.state, "repository"):
        app.state.repository = HeroRepository(get_data_path())
    # Warm the dataset; a failure here is retried on the next request
    try:
        app.state.repository.load_all()
    except DataLoadError as e:
        logger.warning(f"Hero dataset not loaded at startup: {e}")
    yield


app = FastAPI(
    title="Superheroes",
    description="Superhero dataset and powerstat comparison API",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(DataLoadError)
async def data_load_error_handler(request: Request, exc: DataLoadError):
    logger.error(f"Error loading superheroes data on {request.url.path}: {exc}")
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.exception_handler(HeroNotFoundError)
async def hero_not_found_handler(request: Request, exc: HeroNotFoundError):
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return PlainTextResponse(str(exc), status_code=400)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint."""
    return "Save the World!"


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "superheroes"}


# Register routers
app.include_router(superheroes_router)


def serve() -> None:
    """Run the API with uvicorn using host/port from settings."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "superheroes.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
