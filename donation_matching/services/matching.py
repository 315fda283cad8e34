# donation_matching/services/matching.py
import asyncio
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from donation_matching.core.config import Settings, settings as default_settings
from donation_matching.core.errors import InvalidProfileError, MissingOrganizationIdError, NotFoundError
from donation_matching.repos.base import RecordStore
from donation_matching.schemas import DonationRecord, GeoPoint, MatchResult, ScheduleEntry
from donation_matching.services.demand import predict_demand
from donation_matching.services.grouping import GROUP_RADIUS_KM, group_by_proximity
from donation_matching.services.routing import AVG_SPEED_KMH, optimize_route, route_summary
from donation_matching.services.scheduling import SLOT_MINUTES, schedule_group
from donation_matching.services.scoring import rank_candidates

def _utcnow():
    return datetime.now(timezone.utc)

def generate_schedule(donations: List[DonationRecord], origin: GeoPoint,
                      radius_km: float = GROUP_RADIUS_KM,
                      slot_minutes: int = SLOT_MINUTES,
                      avg_speed_kmh: float = AVG_SPEED_KMH) -> List[ScheduleEntry]:
    """
    Group donations by proximity, give each group a pickup slot and a route
    from `origin`. Groups are scheduled in order and each accepted slot blocks
    later groups; groups without a slot are left out.
    """
    schedule: List[ScheduleEntry] = []
    booked: List[datetime] = []

    for group in group_by_proximity(donations, radius_km):
        pickup_time = schedule_group(group, booked, slot_minutes)
        if pickup_time is None:
            logger.debug("no pickup slot for group anchored at {}", group[0].id)
            continue
        route = optimize_route([d.location for d in group], origin)
        dist, eta = route_summary(route, avg_speed_kmh)
        schedule.append(ScheduleEntry(
            donations=group,
            pickup_time=pickup_time,
            route=route,
            distance_km=dist,
            duration_min=eta,
        ))
        booked.append(pickup_time)

    return schedule

async def find_optimal_matches(ngo_id: str, repo: RecordStore,
                               now: Optional[datetime] = None,
                               settings: Optional[Settings] = None) -> MatchResult:
    """
    Predict an organization's needs, rank the available donations in its city
    and plan pickups for the best of them.

    Raises NotFoundError / InvalidProfileError; store errors propagate as-is.
    """
    if not ngo_id:
        raise MissingOrganizationIdError("Organization id is required")
    cfg = settings or default_settings
    now = now or _utcnow()

    # 1) Organization profile
    ngo = await repo.get_organization_profile(ngo_id)
    if ngo is None:
        raise NotFoundError(f"Organization {ngo_id} not found")
    if not ngo.city or ngo.location is None:
        raise InvalidProfileError(f"Organization {ngo_id} has no city/location")

    # 2) Delivered history and open candidates, read concurrently
    history, candidates = await asyncio.gather(
        repo.query_records(organization_id=ngo_id, status="delivered"),
        repo.query_records(status="available", city=ngo.city),
    )
    logger.info("matching org={} city={} history={} candidates={}",
                ngo_id, ngo.city, len(history), len(candidates))

    # 3) Demand profile
    predictions = predict_demand(ngo, history, now=now, recent_window_days=cfg.recent_window_days)

    # 4) Rank and keep the best few
    recommendations = rank_candidates(candidates, predictions, ngo)[:cfg.top_matches]

    # 5) Group, slot and route
    schedule = generate_schedule(
        recommendations, ngo.location,
        radius_km=cfg.group_radius_km,
        slot_minutes=cfg.slot_minutes,
        avg_speed_kmh=cfg.avg_speed_kmh,
    )
    logger.debug("org={} recommendations={} scheduled_groups={}",
                 ngo_id, len(recommendations), len(schedule))

    return MatchResult(predictions=predictions, recommendations=recommendations, schedule=schedule)
