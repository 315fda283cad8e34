# donation_matching/deps.py
from functools import lru_cache

from loguru import logger

from donation_matching.core.config import settings

@lru_cache(maxsize=1)
def get_repo():
    if settings.use_mongo:
        from donation_matching.core.db import get_db
        from donation_matching.repos.mongo import MongoRepo
        logger.info("record store: mongo {}/{}", settings.mongo_uri, settings.mongo_db)
        return MongoRepo(get_db())
    from donation_matching.repos.inmemory import InMemoryRepo
    logger.info("record store: in-memory")
    return InMemoryRepo()
