# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the FestiFind API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    FestiFindException,
    festifind_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import festivals, health
from lib.supabase_client import SupabaseClient
# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Resolves the festival store once at startup so the mode is logged up front.
    """
    logger.info(f"Starting FestiFind API in {settings.ENVIRONMENT} mode")
    store = SupabaseClient.get_store()
    logger.info(f"Serving festivals from the {store.mode} store")

    yield

    logger.info("Shutting down FestiFind API")

# Create FastAPI application
app = FastAPI(
    title="FestiFind API",
    description="""
## Music Festival Listings
Browse festivals and keep personal annotations on them.
### Endpoints
| Endpoint | Purpose |
|----------|---------|
| `GET /api/festivals` | List festivals (optionally only favorites / archived) |
| `POST /api/festivals/{id}/favorite` | Set the favorite flag |
| `POST /api/festivals/{id}/notes` | Replace the notes |
| `POST /api/festivals/{id}/archive` | Set the archived flag |

Without `NEXT_PUBLIC_SUPABASE_URL` and `NEXT_PUBLIC_SUPABASE_ANON_KEY` the API
runs against a mock store: listings show placeholder festivals and updates
succeed without persisting anything.

### Quick Start

```bash
curl -X POST http://localhost:8000/api/festivals/1/favorite \\
  -H "Content-Type: application/json" \\
  -d '{"favorite": true}'
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Festivals",
            "description": "Festival listings, favorites, notes and archive",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)

# =============================================================================
# Middleware
# =============================================================================
# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=settings.is_production,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# =============================================================================
# Exception Handlers
# =============================================================================
@app.exception_handler(FestiFindException)
async def handle_festifind_exception(request: Request, exc: FestiFindException):
    """Handle custom FestiFind exceptions."""
    return await festifind_exception_handler(request, exc)

@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle query/path parameter validation errors."""
    return await validation_exception_handler(request, exc)

@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)

# =============================================================================
# Routers
# =============================================================================
# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Festival endpoints
app.include_router(
    festivals.router,
    prefix="/api/festivals",
    tags=["Festivals"]
)

# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "FestiFind API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }


# =============================================================================
# Local Runner
# =============================================================================

def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
