"""FastAPI application entrypoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.routes import router
from app.infrastructure.db import dispose_engine

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Release pooled database connections on shutdown."""
    yield
    dispose_engine()


app = FastAPI(
    title="Voiture Vehicle Listings",
    description="Vehicle classifieds listing service: search, filters and shareable links",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
