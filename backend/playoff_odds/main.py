"""
Fantasy Playoff Odds Engine - FastAPI Application

Main entry point for the web API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import odds_router
from .core.config import CORS_ORIGINS, configure_logging


configure_logging()

# Create FastAPI app
app = FastAPI(
    title="Fantasy Playoff Odds Engine",
    description="Monte Carlo simulation of playoff odds and remaining strength of schedule for head-to-head fantasy leagues.",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(odds_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Fantasy Playoff Odds Engine API",
        "version": "1.0.0",
        "docs": "/api/docs",
        "health": "/api/health"
    }
