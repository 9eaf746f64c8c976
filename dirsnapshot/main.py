"""
HTTP API exposing directory snapshots.
"""

import logging

from fastapi import FastAPI

from dirsnapshot.api.routers import router as api_router
from dirsnapshot.config.settings import settings

# Create FastAPI app
app = FastAPI(title="Directory Snapshot API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
