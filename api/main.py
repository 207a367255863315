# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from api.utils.auth import get_api_key
from api.utils.config import Config
from api.utils.logging import setup_logger
from api.utils.sessions import store
from api.endpoints.sessions import router as sessions_router
from src.container_configurator.config import get_catalog_info
from typing import Dict, Any

# Set up logging
logger = setup_logger("container_configurator.api")

# Define lifespan context manager (replaces on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code (runs before application starts)
    logger.info("Run on application startup.")
    Config.validate()

    yield  # This is where the application runs

    # Shutdown code (runs when application is shutting down)
    logger.info(f"Application shutting down, dropping {len(store)} sessions.")
    store.clear()

# Create FastAPI application with lifespan
app = FastAPI(
    title="Container Configurator API",
    description="""
    # Container Configurator API

    Assemble a structure out of identical modular containers, customize each
    wall and keep a running price.

    ## Authentication

    Session endpoints require an API key in the `X-API-Key` header.

    ## Workflow

    1. `POST /sessions` starts a session with one container at the origin
    2. `POST /sessions/{id}/pointer` with a unit id selects the container;
       repeat with a face to select that wall or the roof
    3. `POST /sessions/{id}/units` attaches a new container to the selected face
    4. `PUT /sessions/{id}/walls` sets Base / Window / Door on the selected wall
    5. `GET /sessions/{id}/price` and `GET /sessions/{id}/report.txt` for the
       total and the assembly scheme

    Sessions are held in memory only.
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Sessions",
            "description": "Selection, assembly and pricing commands"
        },
        {
            "name": "Catalog",
            "description": "Static dimensions, faces and prices"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["Status"])
async def root():
    logger.info("Root endpoint called")
    return {"status": "online", "message": "Container Configurator API is running"}

# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    return {"status": "healthy", "sessions": str(len(store))}

@app.get("/catalog", tags=["Catalog"], response_model=Dict[str, Any])
async def catalog():
    """Unit dimensions, face geometry, price table and variant picker options."""
    return get_catalog_info()

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with dependencies
app.include_router(
    sessions_router,
    prefix="/sessions",
    tags=["Sessions"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included sessions router with prefix /sessions")

# Run with: uvicorn api.main:app --reload
