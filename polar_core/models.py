from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


UNKNOWN = "Unknown"


# =============================================================================
# FETCH OUTCOMES
# =============================================================================
# Every upstream fetch resolves to one of three tagged states instead of a
# bare None. The service reads the tag; stages only ever see the data.

class OutcomeStatus(Enum):
    SUCCESS = "success"    # data present
    EMPTY = "empty"        # source answered with nothing usable
    FAILED = "failed"      # network, status or parse failure


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one upstream fetch."""
    source: str
    status: OutcomeStatus
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, source: str, data: Any) -> "FetchOutcome":
        status = OutcomeStatus.SUCCESS if data else OutcomeStatus.EMPTY
        return cls(source=source, status=status, data=data)

    @classmethod
    def failure(cls, source: str, error: Any) -> "FetchOutcome":
        return cls(source=source, status=OutcomeStatus.FAILED, error=str(error) or type(error).__name__)

    @property
    def failed(self) -> bool:
        return self.status is OutcomeStatus.FAILED

    def data_or(self, default: Any) -> Any:
        return self.data if self.status is OutcomeStatus.SUCCESS else default


# =============================================================================
# CIVIC LOOKUP RECORDS
# =============================================================================

@dataclass(frozen=True)
class Official:
    """Elected official as listed by the civic lookup."""
    name: Optional[str]
    party: Optional[str] = None
    urls: tuple[str, ...] = ()
    phones: tuple[str, ...] = ()
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'party': self.party,
            'urls': list(self.urls),
            'phones': list(self.phones),
        }


@dataclass(frozen=True)
class Office:
    """Office metadata from the civic lookup.

    division_id is an OCD path, e.g. ocd-division/country:us/state:tx/cd:21"""
    name: Optional[str]
    division_id: Optional[str] = None
    official_indices: tuple[int, ...] = ()
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'divisionId': self.division_id,
            'officialIndices': list(self.official_indices),
        }


@dataclass(frozen=True)
class DistrictInfo:
    """Structured district plus the raw civic lists it was read from.

    state/district stay None when no Representative office matched, even
    though raw_representatives/raw_offices may be populated. Consumers key
    off the structured fields only."""
    state: Optional[str] = None
    district: Optional[int] = None
    raw_representatives: tuple[Official, ...] = ()
    raw_offices: tuple[Office, ...] = ()
    normalized_state: Optional[str] = None   # civic source's normalizedInput.state, informational

    @property
    def is_resolved(self) -> bool:
        return self.state is not None and self.district is not None

    def to_dict(self) -> dict:
        return {
            'state': self.state,
            'district': self.district,
            'rawRepresentatives': [o.to_dict() for o in self.raw_representatives],
            'rawOffices': [o.to_dict() for o in self.raw_offices],
            'normalizedState': self.normalized_state,
        }


# =============================================================================
# LEGISLATIVE RECORDS
# =============================================================================

@dataclass(frozen=True)
class Term:
    """One service term of a legislator."""
    chamber: Optional[str] = None
    state: Optional[str] = None
    district: Optional[int] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    congress: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'chamber': self.chamber,
            'state': self.state,
            'district': self.district,
            'startYear': self.start_year,
            'endYear': self.end_year,
            'congress': self.congress,
        }


@dataclass(frozen=True)
class LegislatorRecord:
    """Canonical legislator shape, whatever roster it came from.

    bioguide_id is the join key against bill sponsors; a record without one
    never matches a bill."""
    bioguide_id: Optional[str]
    name: Optional[str] = None
    direct_order_name: Optional[str] = None
    party: Optional[str] = None
    party_name: Optional[str] = None
    state: Optional[str] = None
    district: Optional[int] = None
    terms: tuple[Term, ...] = ()
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        return self.name or self.direct_order_name or UNKNOWN

    @property
    def display_party(self) -> str:
        return self.party or self.party_name or UNKNOWN

    @property
    def chamber(self) -> str:
        if self.terms and self.terms[0].chamber:
            return self.terms[0].chamber
        return UNKNOWN

    def to_dict(self) -> dict:
        return {
            'bioguideId': self.bioguide_id,
            'name': self.name,
            'directOrderName': self.direct_order_name,
            'party': self.party,
            'partyName': self.party_name,
            'state': self.state,
            'district': self.district,
            'terms': [t.to_dict() for t in self.terms],
        }


@dataclass(frozen=True)
class Bill:
    """Bill with sponsor and cosponsor bioguide ids."""
    number: str
    title: Optional[str] = None
    sponsors: tuple[str, ...] = ()
    cosponsors: tuple[str, ...] = ()
    bill_type: Optional[str] = None     # "HR", "S", "HJRES"
    congress: Optional[int] = None
    introduced_date: Optional[str] = None
    latest_action: Optional[str] = None
    url: Optional[str] = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    def involves(self, bioguide_ids: set[str]) -> bool:
        return any(s in bioguide_ids for s in self.sponsors) or \
            any(c in bioguide_ids for c in self.cosponsors)

    def to_dict(self) -> dict:
        return {
            'number': self.number,
            'title': self.title,
            'sponsors': [{'bioguideId': s} for s in self.sponsors],
            'cosponsors': [{'bioguideId': c} for c in self.cosponsors],
            'type': self.bill_type,
            'congress': self.congress,
            'introducedDate': self.introduced_date,
            'latestAction': self.latest_action,
            'url': self.url,
        }


@dataclass(frozen=True)
class Vote:
    """Roll call vote. Passed through to the report untouched."""
    congress: Optional[int] = None
    chamber: Optional[str] = None
    session: Optional[int] = None
    roll_call: Optional[int] = None
    question: Optional[str] = None
    result: Optional[str] = None
    date: Optional[str] = None
    legislation: Optional[str] = None    # "HR 1234"
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict:
        return {
            'congress': self.congress,
            'chamber': self.chamber,
            'session': self.session,
            'rollCall': self.roll_call,
            'question': self.question,
            'result': self.result,
            'date': self.date,
            'legislation': self.legislation,
        }


# =============================================================================
# LOCAL POLITICAL REPORT
# =============================================================================

@dataclass(frozen=True)
class ReportLocation:
    address: str
    state: Optional[str]
    district: Optional[int]


@dataclass(frozen=True)
class ReportRepresentatives:
    from_civic: tuple[Official, ...] = ()
    from_congress: tuple[LegislatorRecord, ...] = ()


@dataclass(frozen=True)
class ReportLegislation:
    local_bills: tuple[Bill, ...] = ()
    recent_votes: tuple[Vote, ...] = ()


@dataclass(frozen=True)
class ReportSummary:
    total_local_reps: int
    total_local_bills: int
    last_updated: datetime


@dataclass(frozen=True)
class LocalPoliticalReport:
    """Final aggregate for one address. Summary counts always mirror the
    sequences they describe."""
    location: ReportLocation
    representatives: ReportRepresentatives
    legislation: ReportLegislation
    summary: ReportSummary

    def __post_init__(self) -> None:
        if self.summary.total_local_reps != len(self.representatives.from_congress):
            raise ValueError("summary.total_local_reps does not match representatives.from_congress")
        if self.summary.total_local_bills != len(self.legislation.local_bills):
            raise ValueError("summary.total_local_bills does not match legislation.local_bills")

    def to_dict(self) -> dict:
        return {
            'location': {
                'address': self.location.address,
                'state': self.location.state,
                'district': self.location.district,
            },
            'representatives': {
                'fromCivic': [o.to_dict() for o in self.representatives.from_civic],
                'fromCongress': [r.to_dict() for r in self.representatives.from_congress],
            },
            'legislation': {
                'localBills': [b.to_dict() for b in self.legislation.local_bills],
                'recentVotes': [v.to_dict() for v in self.legislation.recent_votes],
            },
            'summary': {
                'totalLocalReps': self.summary.total_local_reps,
                'totalLocalBills': self.summary.total_local_bills,
                'lastUpdated': self.summary.last_updated.isoformat(),
            },
        }
