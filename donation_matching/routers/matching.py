# donation_matching/routers/matching.py
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from donation_matching.core.config import Settings, get_settings
from donation_matching.core.errors import InvalidProfileError, MissingOrganizationIdError, NotFoundError
from donation_matching.deps import get_repo
from donation_matching.schemas import MatchResult
from donation_matching.services.matching import find_optimal_matches

router = APIRouter(prefix="/api/matching", tags=["matching"])

@router.get("/{ngo_id}/optimal", response_model=MatchResult)
async def optimal_matches(
    ngo_id: str,
    now: Optional[datetime] = Query(None, description="Reference instant (defaults to current time)"),
    repo=Depends(get_repo),
    cfg: Settings = Depends(get_settings),
):
    try:
        return await find_optimal_matches(ngo_id, repo, now=now, settings=cfg)
    except NotFoundError as ex:
        logger.warning("matching rejected: {}", ex)
        raise HTTPException(status_code=404, detail=str(ex))
    except InvalidProfileError as ex:
        logger.warning("matching rejected: {}", ex)
        raise HTTPException(status_code=422, detail=str(ex))
    except MissingOrganizationIdError as ex:
        logger.warning("matching rejected: {}", ex)
        raise HTTPException(status_code=400, detail=str(ex))
