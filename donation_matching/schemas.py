from typing import Optional, List, Literal, Union
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator

# --------------------------
# Shared Submodels
# --------------------------
class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

# --------------------------
# Donations
# --------------------------
DonationStatus = Literal["pending", "available", "accepted", "pickedup", "delivered", "cancelled"]

def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    # Mongo hands back naive datetimes that are really UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

class DonationRecord(BaseModel):
    id: str
    food_type: str
    quantity: float
    location: GeoPoint
    available_start_time: Optional[datetime] = None
    available_end_time: Optional[datetime] = None
    created_at: datetime
    status: DonationStatus
    ngo_id: Optional[str] = None
    city: Optional[str] = None

    @field_validator("available_start_time", "available_end_time", "created_at")
    @classmethod
    def _tz(cls, v):
        return _as_utc(v)

    @property
    def has_window(self) -> bool:
        return self.available_start_time is not None and self.available_end_time is not None

# --------------------------
# Organizations
# --------------------------
class NgoProfile(BaseModel):
    id: str
    city: Optional[str] = None
    location: Optional[GeoPoint] = None

# --------------------------
# Matching
# --------------------------
class PickupHour(BaseModel):
    hour: int
    probability: float

class DemandProfile(BaseModel):
    estimated_quantity: float = 0.0
    preferred_food_types: List[str] = []
    best_pickup_times: List[PickupHour] = []
    urgency_score: float = 0.0

class MatchScore(DonationRecord):
    match_score: float

PickupGroup = List[DonationRecord]

class ScheduleEntry(BaseModel):
    donations: List[Union[MatchScore, DonationRecord]]   # scored when coming from a ranking
    pickup_time: datetime
    route: List[GeoPoint]
    distance_km: float = 0.0
    duration_min: float = 0.0

class MatchResult(BaseModel):
    predictions: DemandProfile
    recommendations: List[MatchScore]
    schedule: List[ScheduleEntry]
