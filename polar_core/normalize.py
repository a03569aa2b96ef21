"""
Normalization adapters for upstream payloads.

Each source spells the same facts differently: the civic lookup keys offices
by OCD division path, Congress.gov reports states by full name, districts as
integers or strings, and terms either as a list or wrapped in {"item": [...]}.
These adapters run once at the fetch boundary so the matcher and correlator
only ever read canonical fields.
"""
from typing import Any, Iterable, Optional

from polar_core.models import Bill, LegislatorRecord, Office, Official, Term, Vote


# =============================================================================
# STATE / DISTRICT
# =============================================================================

STATE_CODES: dict[str, str] = {
    "alabama": "AL", "alaska": "AK", "arizona": "AZ", "arkansas": "AR",
    "california": "CA", "colorado": "CO", "connecticut": "CT", "delaware": "DE",
    "florida": "FL", "georgia": "GA", "hawaii": "HI", "idaho": "ID",
    "illinois": "IL", "indiana": "IN", "iowa": "IA", "kansas": "KS",
    "kentucky": "KY", "louisiana": "LA", "maine": "ME", "maryland": "MD",
    "massachusetts": "MA", "michigan": "MI", "minnesota": "MN", "mississippi": "MS",
    "missouri": "MO", "montana": "MT", "nebraska": "NE", "nevada": "NV",
    "new hampshire": "NH", "new jersey": "NJ", "new mexico": "NM", "new york": "NY",
    "north carolina": "NC", "north dakota": "ND", "ohio": "OH", "oklahoma": "OK",
    "oregon": "OR", "pennsylvania": "PA", "rhode island": "RI", "south carolina": "SC",
    "south dakota": "SD", "tennessee": "TN", "texas": "TX", "utah": "UT",
    "vermont": "VT", "virginia": "VA", "washington": "WA", "west virginia": "WV",
    "wisconsin": "WI", "wyoming": "WY",
    # Non-state jurisdictions with a House delegate
    "district of columbia": "DC", "puerto rico": "PR", "guam": "GU",
    "american samoa": "AS", "northern mariana islands": "MP",
    "virgin islands": "VI", "u.s. virgin islands": "VI",
}


def normalize_state(value: Any) -> Optional[str]:
    """Full state name or code -> upper-case code. Unknown names are kept upper-cased."""
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    return STATE_CODES.get(cleaned.lower(), cleaned.upper())


def normalize_district(value: Any) -> Optional[int]:
    """int or digit string -> int; "At-Large", blanks and junk -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def _optional_int(value: Any) -> Optional[int]:
    return normalize_district(value)


def bioguide_id_of(raw: Any) -> Optional[str]:
    """Identity key, accepting the alternate bioGuideId casing."""
    if not isinstance(raw, dict):
        return None
    value = raw.get("bioguideId") or raw.get("bioGuideId")
    return value if isinstance(value, str) and value else None


# =============================================================================
# CIVIC LOOKUP
# =============================================================================

def normalize_official(raw: dict) -> Official:
    return Official(
        name=raw.get("name"),
        party=raw.get("party"),
        urls=tuple(raw.get("urls") or ()),
        phones=tuple(raw.get("phones") or ()),
        raw=raw,
    )


def normalize_office(raw: dict) -> Office:
    return Office(
        name=raw.get("name"),
        division_id=raw.get("divisionId"),
        official_indices=tuple(raw.get("officialIndices") or ()),
        raw=raw,
    )


def normalize_civic_lists(civic_data: dict) -> tuple[tuple[Official, ...], tuple[Office, ...]]:
    officials = tuple(
        normalize_official(o) for o in (civic_data.get("officials") or []) if isinstance(o, dict)
    )
    offices = tuple(
        normalize_office(o) for o in (civic_data.get("offices") or []) if isinstance(o, dict)
    )
    return officials, offices


def civic_normalized_state(civic_data: dict) -> Optional[str]:
    normalized_input = civic_data.get("normalizedInput")
    if not isinstance(normalized_input, dict):
        return None
    return normalize_state(normalized_input.get("state"))


# =============================================================================
# LEGISLATOR ROSTER
# =============================================================================

def terms_list(raw_terms: Any) -> list[dict]:
    """Congress.gov wraps terms as {"item": [...]}; other rosters use a bare list."""
    if isinstance(raw_terms, dict):
        raw_terms = raw_terms.get("item", [])
    if not isinstance(raw_terms, list):
        return []
    return [t for t in raw_terms if isinstance(t, dict)]


def normalize_term(raw: dict) -> Term:
    return Term(
        chamber=raw.get("chamber"),
        state=normalize_state(raw.get("stateCode") or raw.get("state")),
        district=normalize_district(raw.get("district")),
        start_year=_optional_int(raw.get("startYear")),
        end_year=_optional_int(raw.get("endYear")),
        congress=_optional_int(raw.get("congress")),
    )


def normalize_legislator(raw: Any) -> LegislatorRecord:
    if isinstance(raw, LegislatorRecord):
        return raw
    return LegislatorRecord(
        bioguide_id=bioguide_id_of(raw),
        name=raw.get("name"),
        direct_order_name=raw.get("directOrderName"),
        party=raw.get("party"),
        party_name=raw.get("partyName"),
        state=normalize_state(raw.get("state") or raw.get("stateCode")),
        district=normalize_district(raw.get("district")),
        terms=tuple(normalize_term(t) for t in terms_list(raw.get("terms"))),
        raw=raw,
    )


def normalize_legislators(raw_members: Iterable[Any]) -> list[LegislatorRecord]:
    return [
        normalize_legislator(m) for m in raw_members
        if isinstance(m, (dict, LegislatorRecord))
    ]


# =============================================================================
# BILLS / VOTES
# =============================================================================

def _sponsor_ids(raw_sponsors: Any) -> tuple[str, ...]:
    # Congress.gov detail records give cosponsors as {"count": n, "url": ...}
    if not isinstance(raw_sponsors, list):
        return ()
    ids: list[str] = []
    for sponsor in raw_sponsors:
        bioguide_id = sponsor if isinstance(sponsor, str) else bioguide_id_of(sponsor)
        if bioguide_id:
            ids.append(bioguide_id)
    return tuple(ids)


def _bill_number(raw: dict) -> str:
    number = str(raw.get("number") or "Unknown")
    bill_type = raw.get("type")
    if number.isdecimal() and bill_type:
        return f"{str(bill_type).upper()} {number}"
    return number


def normalize_bill(raw: Any) -> Bill:
    if isinstance(raw, Bill):
        return raw
    latest_action = raw.get("latestAction")
    if isinstance(latest_action, dict):
        latest_action = latest_action.get("text")
    bill_type = raw.get("type")
    return Bill(
        number=_bill_number(raw),
        title=raw.get("title"),
        sponsors=_sponsor_ids(raw.get("sponsors")),
        cosponsors=_sponsor_ids(raw.get("cosponsors")),
        bill_type=str(bill_type).upper() if bill_type else None,
        congress=_optional_int(raw.get("congress")),
        introduced_date=raw.get("introducedDate"),
        latest_action=latest_action,
        url=raw.get("url"),
        raw=raw,
    )


def normalize_bills(raw_bills: Iterable[Any]) -> list[Bill]:
    return [normalize_bill(b) for b in raw_bills if isinstance(b, (dict, Bill))]


def normalize_vote(raw: Any) -> Vote:
    if isinstance(raw, Vote):
        return raw
    legislation = None
    if raw.get("legislationType") and raw.get("legislationNumber"):
        legislation = f"{str(raw['legislationType']).upper()} {raw['legislationNumber']}"
    return Vote(
        congress=_optional_int(raw.get("congress")),
        chamber=raw.get("chamber"),
        session=_optional_int(raw.get("sessionNumber")),
        roll_call=_optional_int(raw.get("rollCallNumber")),
        question=raw.get("voteQuestion") or raw.get("question"),
        result=raw.get("result"),
        date=raw.get("startDate") or raw.get("date"),
        legislation=legislation,
        raw=raw,
    )


def normalize_votes(raw_votes: Iterable[Any]) -> list[Vote]:
    return [normalize_vote(v) for v in raw_votes if isinstance(v, (dict, Vote))]
