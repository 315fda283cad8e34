# donation_matching/repos/inmemory.py
from typing import Dict, List, Optional

from donation_matching.schemas import DonationRecord, NgoProfile

class InMemoryRepo:
    def __init__(self):
        self.organizations: Dict[str, NgoProfile] = {}
        self.donations: Dict[str, DonationRecord] = {}

    # Seeding
    def add_organization(self, ngo: NgoProfile) -> NgoProfile:
        self.organizations[ngo.id] = ngo
        return ngo

    def add_donation(self, donation: DonationRecord) -> DonationRecord:
        self.donations[donation.id] = donation
        return donation

    # RecordStore
    async def get_organization_profile(self, ngo_id: str) -> Optional[NgoProfile]:
        return self.organizations.get(ngo_id)

    async def query_records(self, organization_id: Optional[str] = None,
                            status: Optional[str] = None,
                            city: Optional[str] = None) -> List[DonationRecord]:
        vals = self.donations.values()
        out = [
            d for d in vals
            if (organization_id is None or d.ngo_id == organization_id)
            and (status is None or d.status == status)
            and (city is None or d.city == city)
        ]
        return sorted(out, key=lambda d: d.created_at, reverse=True)
