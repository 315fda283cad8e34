# donation_matching/services/grouping.py
from typing import List

from donation_matching.schemas import DonationRecord, PickupGroup
from donation_matching.services.geo import distance_km

GROUP_RADIUS_KM = 5.0

def group_by_proximity(donations: List[DonationRecord], radius_km: float = GROUP_RADIUS_KM) -> List[PickupGroup]:
    """
    Greedy single pass: each unprocessed donation anchors a new group and pulls
    in every other unprocessed donation within `radius_km` of the anchor.

    Groups are star-shaped around their anchor, not transitive closures, so two
    members may sit up to 2 * radius_km apart. Output depends on input order.
    """
    groups: List[PickupGroup] = []
    processed = set()   # indices into donations

    for i, anchor in enumerate(donations):
        if i in processed:
            continue
        group = [anchor]
        processed.add(i)
        for j, other in enumerate(donations):
            if j in processed:
                continue
            if distance_km(anchor.location, other.location) <= radius_km:
                group.append(other)
                processed.add(j)
        groups.append(group)

    return groups
