# donation_matching/repos/base.py
from typing import List, Optional, Protocol

from donation_matching.schemas import DonationRecord, NgoProfile

class RecordStore(Protocol):
    """Read side of the record store the matching engine depends on."""

    async def get_organization_profile(self, ngo_id: str) -> Optional[NgoProfile]:
        ...

    async def query_records(self, organization_id: Optional[str] = None,
                            status: Optional[str] = None,
                            city: Optional[str] = None) -> List[DonationRecord]:
        """Records matching every given filter, newest `created_at` first."""
        ...
