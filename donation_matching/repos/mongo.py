# donation_matching/repos/mongo.py
from typing import Any, Dict, List, Optional

from bson import ObjectId
from loguru import logger
from pymongo import ASCENDING, DESCENDING

from donation_matching.schemas import DonationRecord, GeoPoint, NgoProfile

def _maybe_oid(x: Any) -> ObjectId | None:
    if isinstance(x, ObjectId):
        return x
    if isinstance(x, str) and ObjectId.is_valid(x):
        return ObjectId(x)
    return None

def _id_filter(any_id: str) -> dict:
    """
    Match a document by Mongo _id (ObjectId or plain string) or custom 'id' field.
    """
    conds: List[dict] = []
    oid = _maybe_oid(any_id)
    if oid:
        conds.append({"_id": oid})
    conds.append({"_id": any_id})
    conds.append({"id": any_id})
    return {"$or": conds}

def _pick(doc: dict, *names, default=None):
    for n in names:
        if doc.get(n) is not None:
            return doc[n]
    return default

def to_geo(loc: Optional[dict]) -> Optional[GeoPoint]:
    """Accepts {lat, lng} or {latitude, longitude}."""
    if not loc:
        return None
    lat = _pick(loc, "latitude", "lat")
    lng = _pick(loc, "longitude", "lng")
    if lat is None or lng is None:
        return None
    return GeoPoint(latitude=float(lat), longitude=float(lng))

def to_profile(doc: dict) -> NgoProfile:
    return NgoProfile(
        id=str(_pick(doc, "id", "_id")),
        city=doc.get("city"),
        location=to_geo(doc.get("location")),
    )

def to_record(doc: dict) -> DonationRecord:
    """
    Raises pydantic.ValidationError for a document missing a required field
    (e.g. no usable location). The error is not caught here, so one bad
    document fails the whole query.
    """
    return DonationRecord(
        id=str(_pick(doc, "id", "_id")),
        food_type=doc.get("food_type") or "",
        quantity=float(doc.get("quantity") or 0),
        location=to_geo(doc.get("location")),
        available_start_time=doc.get("available_start_time"),
        available_end_time=doc.get("available_end_time"),
        created_at=doc.get("created_at"),
        status=doc.get("status"),
        ngo_id=doc.get("ngo_id"),
        city=doc.get("city"),
    )

class MongoRepo:
    def __init__(self, db):
        self.db = db

    async def get_organization_profile(self, ngo_id: str) -> Optional[NgoProfile]:
        doc = await self.db.users.find_one(_id_filter(ngo_id))
        return to_profile(doc) if doc else None

    async def query_records(self, organization_id: Optional[str] = None,
                            status: Optional[str] = None,
                            city: Optional[str] = None) -> List[DonationRecord]:
        q: Dict[str, Any] = {}
        if organization_id is not None:
            q["ngo_id"] = organization_id
        if status is not None:
            q["status"] = status
        if city is not None:
            q["city"] = city
        cur = self.db.donations.find(q).sort("created_at", DESCENDING)
        return [to_record(d) async for d in cur]

    async def ensure_indexes(self):
        async def ensure_index(col, keys, name: str, **kwargs):
            existing = [ix["name"] async for ix in col.list_indexes()]
            if name in existing:
                return
            await col.create_index(keys, name=name, **kwargs)
            logger.info("created index {}.{}", col.name, name)

        await ensure_index(self.db.donations, [("status", ASCENDING)], "status_1")
        await ensure_index(self.db.donations, [("ngo_id", ASCENDING), ("status", ASCENDING)], "ngo_id_1_status_1")
        await ensure_index(self.db.donations, [("status", ASCENDING), ("city", ASCENDING)], "status_1_city_1")
        await ensure_index(self.db.donations, [("created_at", DESCENDING)], "created_at_-1")
