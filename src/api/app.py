"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import leases
from src.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Lease Exit Analyzer",
    description="Compare the cost of every way out of a vehicle lease",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(leases.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
