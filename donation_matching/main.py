# donation_matching/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from donation_matching.core.config import settings
from donation_matching.core.logging import setup_logging
from donation_matching.routers import matching as matching_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)

    if settings.use_mongo:
        from donation_matching.core.db import get_client
        from donation_matching.deps import get_repo
        await get_repo().ensure_indexes()
        logger.info("matching service started (mongo)")
        yield
        get_client().close()
    else:
        logger.info("matching service started (in-memory store)")
        yield

app = FastAPI(lifespan=lifespan, title="FoodBridge Matching API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(matching_router.router)      # /api/matching

# Health
@app.get("/health")
def health():
    return {"ok": True}
