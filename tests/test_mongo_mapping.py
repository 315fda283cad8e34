from datetime import datetime, timezone

from bson import ObjectId

from donation_matching.repos.mongo import _id_filter, to_geo, to_profile, to_record
from donation_matching.schemas import GeoPoint

def test_to_record_from_backend_document():
    oid = ObjectId()
    rec = to_record({
        "_id": oid,
        "food_type": "Rice",
        "quantity": "12.5",
        "location": {"lat": 14.6, "lng": 120.98},
        "available_start_time": datetime(2024, 5, 16, 9, 0),
        "available_end_time": datetime(2024, 5, 16, 11, 0),
        "created_at": datetime(2024, 5, 15, 8, 0),
        "status": "available",
        "city": "Manila",
    })
    assert rec.id == str(oid)
    assert rec.quantity == 12.5
    assert rec.location == GeoPoint(latitude=14.6, longitude=120.98)
    # naive Mongo datetimes are UTC
    assert rec.created_at == datetime(2024, 5, 15, 8, 0, tzinfo=timezone.utc)
    assert rec.has_window
    assert rec.ngo_id is None

def test_to_record_without_window():
    rec = to_record({
        "_id": "d1", "food_type": "Veg", "quantity": None,
        "location": {"latitude": 1.0, "longitude": 2.0},
        "created_at": datetime(2024, 5, 15, 8, 0), "status": "delivered", "ngo_id": "N1",
    })
    assert rec.quantity == 0
    assert not rec.has_window
    assert rec.ngo_id == "N1"

def test_to_profile_tolerates_missing_fields():
    p = to_profile({"_id": "N1"})
    assert p.id == "N1"
    assert p.city is None and p.location is None
    assert to_geo({"lat": 1.0}) is None

def test_id_filter():
    oid = ObjectId()
    q = _id_filter(str(oid))
    assert {"_id": oid} in q["$or"]
    assert _id_filter("plain")["$or"] == [{"_id": "plain"}, {"id": "plain"}]
