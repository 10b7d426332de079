"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_console.api.console_router import api as console_api
from inventory_console.api.dependencies import console_config, error_handler, inventory_backend, session_store

# Setup logging
logging.basicConfig(level=getattr(logging, console_config.logging.level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Inventory Console",
    description="Admin console for products, suppliers and orders of an inventory REST API",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness check with the backend in use."""
    return {
        "service": "Inventory Console",
        "status": "healthy",
        "backend": "real" if console_config.use_real_backend() else "mock",
        "sessions": len(session_store),
        "timestamp": datetime.now().isoformat(),
    }


app.include_router(console_api)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    payload = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=500, content=payload)


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting Inventory Console...")
    logger.info("Inventory backend: %s", type(inventory_backend).__name__)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Inventory Console...")
