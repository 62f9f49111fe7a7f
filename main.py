from contextlib import asynccontextmanager

from fastapi import FastAPI

from bizhub.infrastructure.database import engine, initialize_database
from bizhub.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database tables on startup and release resources on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""

    app = FastAPI(lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
