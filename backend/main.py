"""
Bill Split API

A FastAPI backend that splits itemized bills between group members.
This module sets up the app and mounts routers - all endpoint logic is in routers/.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL

# Import routers
from routers import splits


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Initialize FastAPI app
app = FastAPI(
    title="Bill Split API",
    description="API for splitting itemized bills with platform fees, discounts and free cash",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(splits.router)
