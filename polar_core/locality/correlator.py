"""
LegislationCorrelator: which bills did the local representatives sponsor or
cosponsor.
"""
from typing import Iterable

from polar_core.models import Bill, LegislatorRecord


def correlate_bills(
    representatives: Iterable[LegislatorRecord],
    bills: Iterable[Bill],
    limit: int,
) -> list[Bill]:
    """
    Walk bills in upstream order and keep those involving any representative.

    Stops at the first ``limit`` matches. Bills after that point are never
    examined, so the result depends on the order the source returned.
    Representatives without a bioguide id are ignored.
    """
    bioguide_ids = {rep.bioguide_id for rep in representatives if rep.bioguide_id}
    if limit <= 0 or not bioguide_ids:
        return []

    local_bills: list[Bill] = []
    for bill in bills:
        if bill.involves(bioguide_ids):
            local_bills.append(bill)
            if len(local_bills) >= limit:
                break

    return local_bills
