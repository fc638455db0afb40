"""
FastAPI application exposing extension association lookups.
"""

import logging

from fastapi import FastAPI

from bindx import __version__
from bindx.api.routers import router as api_router

# Create FastAPI app
app = FastAPI(title="bindx", version=__version__)
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
