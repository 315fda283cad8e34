# donation_matching/core/db.py
from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient

from donation_matching.core.config import settings

@lru_cache(maxsize=1)
def get_client() -> AsyncIOMotorClient:
    # Cached to play nicely with uvicorn --reload
    return AsyncIOMotorClient(settings.mongo_uri, uuidRepresentation="standard")

def get_db():
    return get_client()[settings.mongo_db]
