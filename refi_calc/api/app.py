"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from refi_calc.api.routes import refinance
from refi_calc.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Refi Calculator",
    description="Mortgage refinance breakeven calculator",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(refinance.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
