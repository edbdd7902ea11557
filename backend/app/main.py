"""Module: main."""

import logging
import logging.config

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.init_db import init_db

# Apply logging configuration
logging.config.dictConfig(settings.logging_config)

logger = logging.getLogger(__name__)

app = FastAPI(title="Prescription Desk API", version="0.1.0")

app.include_router(api_router, prefix="/api/v1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

init_db()
logger.info("Prescription Desk API ready")
