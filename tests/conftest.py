"""
Pytest fixtures and configuration.

- Fixtures mirror the real upstream payload shapes (Google Civic, Congress.gov)
- Upstream fetches are replaced by plain fakes injected into LocalityService
- Each test should be independent and fast
"""
import pytest
from typing import Any, Callable
from dotenv import load_dotenv

from polar_core.config import LocalityConfig
from polar_core.locality.service import LocalityService
from polar_core.models import Bill, LegislatorRecord, Term

load_dotenv()


# =============================================================================
# CIVIC LOOKUP FIXTURES
# =============================================================================

@pytest.fixture
def sample_civic_response() -> dict[str, Any]:
    """Civic lookup for an address in Texas' 21st district."""
    return {
        "kind": "civicinfo#representativeInfoResponse",
        "normalizedInput": {
            "line1": "1100 Congress Ave",
            "city": "Austin",
            "state": "TX",
            "zip": "78701",
        },
        "offices": [
            {
                "name": "President of the United States",
                "divisionId": "ocd-division/country:us",
                "officialIndices": [0],
            },
            {
                "name": "U.S. Senator",
                "divisionId": "ocd-division/country:us/state:tx",
                "officialIndices": [1, 2],
            },
            {
                "name": "U.S. Representative",
                "divisionId": "ocd-division/country:us/state:tx/cd:21",
                "officialIndices": [3],
            },
            {
                "name": "TX State Representative District 49",
                "divisionId": "ocd-division/country:us/state:tx/sldl:49",
                "officialIndices": [4],
            },
        ],
        "officials": [
            {"name": "Joseph R. Biden", "party": "Democratic Party"},
            {"name": "John Cornyn", "party": "Republican Party"},
            {"name": "Ted Cruz", "party": "Republican Party"},
            {"name": "Chip Roy", "party": "Republican Party", "urls": ["https://roy.house.gov/"]},
            {"name": "Gina Hinojosa", "party": "Democratic Party"},
        ],
    }


@pytest.fixture
def dc_civic_response() -> dict[str, Any]:
    """Civic lookup for 1600 Pennsylvania Avenue NW."""
    return {
        "normalizedInput": {"line1": "1600 Pennsylvania Avenue NW", "city": "Washington", "state": "DC"},
        "offices": [
            {
                "name": "U.S. House Representative",
                "divisionId": "ocd-division/country:us/state:dc/cd:0",
                "officialIndices": [0],
            },
        ],
        "officials": [
            {"name": "Eleanor Holmes Norton", "party": "Democratic Party"},
        ],
    }


@pytest.fixture
def civic_response_without_house_seat() -> dict[str, Any]:
    """Officials present, but no office names a House Representative."""
    return {
        "normalizedInput": {"state": "TX"},
        "offices": [
            {"name": "U.S. Senator", "divisionId": "ocd-division/country:us/state:tx", "officialIndices": [0]},
        ],
        "officials": [{"name": "John Cornyn", "party": "Republican Party"}],
    }


# =============================================================================
# CONGRESS.GOV RAW FIXTURES
# =============================================================================

@pytest.fixture
def sample_member_records() -> list[dict[str, Any]]:
    """Congress.gov /member/congress/118/TX records (trimmed)."""
    return [
        {
            "bioguideId": "C001056",
            "name": "Cornyn, John",
            "partyName": "Republican",
            "state": "Texas",
            "terms": {"item": [{"chamber": "Senate", "startYear": 2002}]},
        },
        {
            "bioguideId": "R000614",
            "name": "Roy, Chip",
            "partyName": "Republican",
            "state": "Texas",
            "district": 21,
            "terms": {"item": [{"chamber": "House of Representatives", "startYear": 2019}]},
        },
        {
            "bioguideId": "C001131",
            "name": "Casar, Greg",
            "partyName": "Democratic",
            "state": "Texas",
            "district": 35,
            "terms": {"item": [{"chamber": "House of Representatives", "startYear": 2023}]},
        },
        {
            "bioguideId": "C001098",
            "name": "Cruz, Ted",
            "partyName": "Republican",
            "state": "Texas",
            "terms": {"item": [{"chamber": "Senate", "startYear": 2013}]},
        },
    ]


@pytest.fixture
def sample_bill_records() -> list[dict[str, Any]]:
    """Congress.gov bill detail records, most recently updated first."""
    return [
        {
            "congress": 118,
            "type": "HR",
            "number": "8912",
            "title": "Border Security Enforcement Act",
            "introducedDate": "2024-07-09",
            "latestAction": {"actionDate": "2024-07-09", "text": "Referred to the House Committee on the Judiciary."},
            "sponsors": [{"bioguideId": "R000614", "fullName": "Rep. Roy, Chip [R-TX-21]"}],
            "cosponsors": {"count": 3, "url": "https://api.congress.gov/v3/bill/118/hr/8912/cosponsors"},
        },
        {
            "congress": 118,
            "type": "HR",
            "number": "7001",
            "title": "Heat Workforce Standards Act",
            "sponsors": [{"bioguideId": "C001131"}],
            "cosponsors": [],
        },
        {
            "congress": 118,
            "type": "S",
            "number": "4410",
            "title": "Rural Broadband Expansion Act",
            "sponsors": [{"bioguideId": "K000384"}],
            "cosponsors": [{"bioguideId": "R000614"}],
        },
        {
            "congress": 118,
            "type": "HR",
            "number": "5555",
            "title": "Unrelated Act",
            "sponsors": [{"bioguideId": "P000197"}],
            "cosponsors": [],
        },
    ]


@pytest.fixture
def sample_vote_records() -> list[dict[str, Any]]:
    """Congress.gov /house-vote/118 records."""
    return [
        {
            "congress": 118,
            "sessionNumber": 2,
            "rollCallNumber": 512,
            "result": "Passed",
            "startDate": "2024-12-18T14:02:00-05:00",
            "legislationType": "HR",
            "legislationNumber": "8912",
            "voteType": "Yea-and-Nay",
        },
        {
            "congress": 118,
            "sessionNumber": 2,
            "rollCallNumber": 511,
            "result": "Failed",
            "startDate": "2024-12-18T13:40:00-05:00",
        },
    ]


# =============================================================================
# NORMALIZED RECORD FIXTURES
# =============================================================================

@pytest.fixture
def texas_roster() -> list[LegislatorRecord]:
    return [
        LegislatorRecord(bioguide_id="X1", name="Rep. One", state="TX", district=21,
                         terms=(Term(chamber="House of Representatives", district=21),)),
        LegislatorRecord(bioguide_id="X2", name="Rep. Two", state="TX", district=35,
                         terms=(Term(chamber="House of Representatives", district=35),)),
        LegislatorRecord(bioguide_id="S1", name="Sen. Three", state="TX",
                         terms=(Term(chamber="Senate"),)),
        LegislatorRecord(bioguide_id="C1", name="Rep. Four", state="CA", district=21),
    ]


@pytest.fixture
def make_bill() -> Callable[..., Bill]:
    def _make(number: str, sponsors=(), cosponsors=(), title: str | None = "A bill") -> Bill:
        return Bill(number=number, title=title, sponsors=tuple(sponsors), cosponsors=tuple(cosponsors))
    return _make


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def fast_config() -> LocalityConfig:
    return LocalityConfig(congress=118, bill_pool_size=50, local_bill_limit=10,
                          recent_vote_limit=20, fetch_timeout=5.0)


@pytest.fixture
def make_service(
    fast_config,
    sample_civic_response,
    sample_member_records,
    sample_bill_records,
    sample_vote_records,
) -> Callable[..., LocalityService]:
    """
    LocalityService with in-memory fakes. Any fetch can be overridden; each
    fake records its call arguments on ``service.calls``.
    """
    def _make(civic=None, roster=None, bills=None, votes=None, config=None) -> LocalityService:
        calls: dict[str, list[tuple]] = {"civic": [], "roster": [], "bills": [], "votes": []}

        def civic_lookup(address):
            calls["civic"].append((address,))
            return sample_civic_response

        def legislator_roster(congress, state, chamber):
            calls["roster"].append((congress, state, chamber))
            return sample_member_records

        def bill_roster(congress, limit):
            calls["bills"].append((congress, limit))
            return sample_bill_records

        def recent_votes(congress, chamber, limit):
            calls["votes"].append((congress, chamber, limit))
            return sample_vote_records

        service = LocalityService(
            civic_lookup=civic or civic_lookup,
            legislator_roster=roster or legislator_roster,
            bill_roster=bills or bill_roster,
            recent_votes=votes or recent_votes,
            config=config or fast_config,
        )
        service.calls = calls
        return service

    return _make
