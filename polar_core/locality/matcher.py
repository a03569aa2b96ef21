"""
RepresentativeMatcher: {state, district} -> legislators serving there.

Fallback rule: the district filter only narrows the result when it finds
someone. An empty district match returns the whole state, so callers cannot
tell "matched by district" from "fell back to state" by the result alone.
"""
from typing import Any, Iterable, Optional

from polar_core.models import LegislatorRecord
from polar_core.normalize import normalize_district


def serves_district(record: LegislatorRecord, district: int) -> bool:
    if record.district == district:
        return True
    return any(term.district == district for term in record.terms)


def match_representatives(
    state: Optional[str],
    district: Any,
    roster: Iterable[LegislatorRecord],
) -> list[LegislatorRecord]:
    """
    Args:
        state: Two-letter state code, any case. None yields no match.
        district: District number as int or numeric string, or None
        roster: Normalized legislator records

    Returns:
        District members if any, else every member of the state
    """
    if not state:
        return []

    target_state = state.strip().upper()
    state_members = [
        record for record in roster
        if record.state is not None and record.state.upper() == target_state
    ]

    if district is None:
        return state_members

    target_district = normalize_district(district)
    if target_district is None:
        return state_members

    district_members = [r for r in state_members if serves_district(r, target_district)]
    return district_members if district_members else state_members
