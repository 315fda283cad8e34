# donation_matching/services/scoring.py
from typing import List

from donation_matching.schemas import DemandProfile, DonationRecord, MatchScore, NgoProfile
from donation_matching.services.geo import distance_km

FOOD_TYPE_POINTS = 30.0
QUANTITY_POINTS = 20.0
DISTANCE_POINTS = 30.0
DISTANCE_DECAY_PER_KM = 3.0     # 30 points gone at 10 km
PICKUP_HOUR_POINTS = 20.0

def score_donation(donation: DonationRecord, profile: DemandProfile, ngo: NgoProfile) -> float:
    """
    Fit of one candidate for an organization, in [0, 100]:
      - preferred food type        +30
      - quantity close to estimate up to +20
      - distance to the org        up to +30, zero from 10 km
      - starts at a busy hour      +20
    """
    type_term = FOOD_TYPE_POINTS if donation.food_type in profile.preferred_food_types else 0.0

    qty_term = 0.0
    est = profile.estimated_quantity
    if est:
        qty_term = max(0.0, QUANTITY_POINTS - QUANTITY_POINTS * abs(donation.quantity - est) / est)

    dist_term = max(0.0, DISTANCE_POINTS - DISTANCE_DECAY_PER_KM * distance_km(donation.location, ngo.location))

    hour_term = 0.0
    if donation.available_start_time is not None:
        hour = donation.available_start_time.hour
        if any(t.hour == hour for t in profile.best_pickup_times):
            hour_term = PICKUP_HOUR_POINTS

    return min(100.0, max(0.0, type_term + qty_term + dist_term + hour_term))

def rank_candidates(donations: List[DonationRecord], profile: DemandProfile,
                    ngo: NgoProfile) -> List[MatchScore]:
    scored = [
        MatchScore(**d.model_dump(), match_score=score_donation(d, profile, ngo))
        for d in donations
    ]
    # sorted() is stable, so equal scores keep their input order
    return sorted(scored, key=lambda s: s.match_score, reverse=True)
