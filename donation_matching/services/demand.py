# donation_matching/services/demand.py
from collections import Counter
from datetime import datetime, timedelta, timezone
from math import floor
from typing import List, Optional

from donation_matching.schemas import DemandProfile, DonationRecord, NgoProfile, PickupHour

TOP_FOOD_TYPES = 3
TOP_PICKUP_HOURS = 3
RECENT_WINDOW_DAYS = 7

def _round_half_up(x: float) -> int:
    return int(floor(x + 0.5))

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def predict_demand(ngo: NgoProfile, history: List[DonationRecord],
                   now: Optional[datetime] = None,
                   recent_window_days: int = RECENT_WINDOW_DAYS) -> DemandProfile:
    """
    Summarize an organization's delivered history into a DemandProfile.

    `now` is the reference instant for the weekday estimate and the urgency
    window; pass it explicitly for reproducible output.
    """
    if not history:
        return DemandProfile()
    if now is None:
        now = _utcnow()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    # buckets are UTC weekdays and hours, whatever offset `now` arrives with
    now = now.astimezone(timezone.utc)

    # 1) Bucket by weekday and hour of creation
    by_day = [0] * 7
    by_hour = [0] * 24
    for d in history:
        created = d.created_at.astimezone(timezone.utc)
        by_day[created.weekday()] += 1
        by_hour[created.hour] += 1

    # 2) Share of pickups falling on today's weekday
    estimated = _round_half_up(by_day[now.weekday()] / len(history) * 100)

    # 3) Most frequent food types; Counter keeps first-seen order on ties
    food_counts = Counter(d.food_type for d in history)
    preferred = [ft for ft, _ in food_counts.most_common(TOP_FOOD_TYPES)]

    # 4) Busiest hours, normalized against the busiest one
    peak = max(by_hour)
    hours = sorted((h for h in range(24) if by_hour[h] > 0), key=lambda h: by_hour[h], reverse=True)
    best_times = [PickupHour(hour=h, probability=by_hour[h] / peak) for h in hours[:TOP_PICKUP_HOURS]]

    # 5) Fewer recent pickups => more urgent
    window = timedelta(days=recent_window_days)
    recent = sum(1 for d in history if now - d.created_at < window)
    urgency = min(100, max(0, _round_half_up((1 - recent / recent_window_days) * 100)))

    return DemandProfile(
        estimated_quantity=float(estimated),
        preferred_food_types=preferred,
        best_pickup_times=best_times,
        urgency_score=float(urgency),
    )
