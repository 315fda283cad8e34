# donation_matching/services/scheduling.py
from datetime import datetime, timedelta
from typing import List, Optional

from donation_matching.schemas import PickupGroup

SLOT_MINUTES = 30

def common_window(group: PickupGroup):
    """
    Intersection of the members' availability windows as (start, end), or
    None when a member has no window or the windows do not overlap.
    """
    if not group or not all(d.has_window for d in group):
        return None
    start = max(d.available_start_time for d in group)
    end = min(d.available_end_time for d in group)
    if start >= end:
        return None
    return start, end

def schedule_group(group: PickupGroup, booked_slots: List[datetime],
                   slot_minutes: int = SLOT_MINUTES) -> Optional[datetime]:
    """
    Earliest slot (start, start+30m, ... up to end) inside the group's common
    window that is at least `slot_minutes` away from every booked slot.

    Does not touch `booked_slots`; the caller appends the result before
    scheduling the next group.
    """
    window = common_window(group)
    if window is None:
        return None
    start, end = window

    step = timedelta(minutes=slot_minutes)
    t = start
    while t <= end:
        if all(abs(t - slot) >= step for slot in booked_slots):
            return t
        t += step
    return None
