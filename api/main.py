# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict

from api.utils.config import Config
from api.utils.logging import api_logger as logger
from api.endpoints.shell import router as shell_router

import building_shell_generator


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code (runs before application starts)
    logger.info("Run on application startup.")
    Config.validate()

    yield  # This is where the application runs

    # Shutdown code (runs when application is shutting down)
    logger.info("Application shutting down.")


logger.info("==== API INITIALIZATION STARTING ====")

app = FastAPI(
    title="Building Shell API",
    description="""
    # Building Shell Generator API

    Computes the geometry of a rectangular single-story building shell:
    footprint outline, wall centerlines, door and window placements and a
    gable roof profile.

    ## Authentication

    `/shell` endpoints require an API key in the `X-API-Key` header.

    ## Units

    Request dimensions are given in display units (millimeters by default).
    Level elevation and thicknesses, and every coordinate in the response,
    are in internal units (decimal feet).
    """,
    version=building_shell_generator.__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Shell",
            "description": "Shell geometry planning"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        },
    ],
    lifespan=lifespan,
)


@app.get("/", tags=["Status"])
async def root():
    return {"status": "online", "message": "Building Shell API is running"}


@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    return {"status": "healthy", "version": building_shell_generator.__version__}


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    shell_router,
    prefix="/shell",
    tags=["Shell"],
)

logger.info("==== API INITIALIZATION COMPLETE ====")

# Run with: uvicorn api.main:app --reload
