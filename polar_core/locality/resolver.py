"""
AddressResolver: free-text address -> {state, district}.

Scans the civic lookup's offices for a House "Representative" seat and reads
state and district out of its OCD division id, e.g.
    ocd-division/country:us/state:tx/cd:21  ->  ("TX", 21)
"""
import re
from typing import Any, Callable, Iterable, Optional

from polar_core.models import DistrictInfo, Office
from polar_core.normalize import civic_normalized_state, normalize_civic_lists

REPRESENTATIVE_MARKER: str = "Representative"
DIVISION_PATTERN = re.compile(r"state:([A-Za-z0-9]{2,4})/cd:(\d+)")


def district_from_offices(offices: Iterable[Office]) -> tuple[Optional[str], Optional[int]]:
    """
    Last matching office wins: each match overwrites the previous one, so the
    result follows the office order of the civic response.
    """
    state: Optional[str] = None
    district: Optional[int] = None

    for office in offices:
        # Case-sensitive marker match on the office title
        if not office.name or REPRESENTATIVE_MARKER not in office.name:
            continue
        if not office.division_id:
            continue
        match = DIVISION_PATTERN.search(office.division_id)
        if match:
            state = match.group(1).upper()
            district = int(match.group(2))

    return state, district


def district_info_from_civic(civic_data: Optional[dict[str, Any]]) -> DistrictInfo:
    """Build DistrictInfo from an already-fetched civic response."""
    if not civic_data or not isinstance(civic_data, dict):
        return DistrictInfo()

    officials, offices = normalize_civic_lists(civic_data)
    state, district = district_from_offices(offices)

    return DistrictInfo(
        state=state,
        district=district,
        raw_representatives=officials,
        raw_offices=offices,
        normalized_state=civic_normalized_state(civic_data),
    )


def resolve_district(address: str, civic_lookup: Callable[[str], Optional[dict[str, Any]]]) -> DistrictInfo:
    """
    Resolve an address with the given civic lookup.

    A failing or empty lookup degrades to DistrictInfo with null state and
    district and no raw data; nothing is raised and nothing is logged here.

    Args:
        address: Free-text address
        civic_lookup: Callable returning the raw civic response for an address

    Returns:
        DistrictInfo
    """
    try:
        civic_data = civic_lookup(address)
    except Exception:  # pylint: disable=broad-exception-caught
        return DistrictInfo()
    return district_info_from_civic(civic_data)
