"""
ReportCompiler: merge stage outputs into a LocalPoliticalReport and flatten
it into display lines.
"""
from datetime import datetime, timezone
from typing import Iterable, Optional

from polar_core.models import (
    UNKNOWN,
    Bill,
    DistrictInfo,
    LegislatorRecord,
    LocalPoliticalReport,
    ReportLegislation,
    ReportLocation,
    ReportRepresentatives,
    ReportSummary,
    Vote,
)

BILL_DISPLAY_LIMIT: int = 5
NO_TITLE: str = "No title available"
AT_LARGE: str = "At Large"


def compile_report(
    address: str,
    district_info: DistrictInfo,
    local_reps: Iterable[LegislatorRecord],
    local_bills: Iterable[Bill],
    recent_votes: Iterable[Vote],
    now: Optional[datetime] = None,
) -> LocalPoliticalReport:
    """
    Assemble the report. Summary counts are taken from the sequences
    themselves and lastUpdated is stamped here, once.
    """
    reps = tuple(local_reps)
    bills = tuple(local_bills)

    return LocalPoliticalReport(
        location=ReportLocation(
            address=address,
            state=district_info.state,
            district=district_info.district,
        ),
        representatives=ReportRepresentatives(
            from_civic=tuple(district_info.raw_representatives),
            from_congress=reps,
        ),
        legislation=ReportLegislation(
            local_bills=bills,
            recent_votes=tuple(recent_votes),
        ),
        summary=ReportSummary(
            total_local_reps=len(reps),
            total_local_bills=len(bills),
            last_updated=now or datetime.now(timezone.utc),
        ),
    )


def _district_label(state: Optional[str], district: Optional[int]) -> str:
    # None means unknown; only an explicit 0 is an at-large seat
    if district is None:
        district_part = UNKNOWN
    elif district == 0:
        district_part = AT_LARGE
    else:
        district_part = str(district)
    return f"{state or UNKNOWN}-{district_part}"


def _timestamp_label(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def render_report(report: Optional[LocalPoliticalReport]) -> list[str]:
    """
    Flatten a report into display lines: summary, one line per
    representative, then at most five bills.
    """
    if report is None:
        return []

    lines = [
        f"Location: {report.location.address}",
        f"Congressional District: {_district_label(report.location.state, report.location.district)}",
        f"Local Representatives: {report.summary.total_local_reps}",
        f"Local Bills: {report.summary.total_local_bills}",
        f"Data Updated: {_timestamp_label(report.summary.last_updated)}",
    ]

    if report.representatives.from_congress:
        lines.append("--- REPRESENTATIVES ---")
        for rep in report.representatives.from_congress:
            lines.append(f"{rep.display_name} ({rep.display_party}) - {rep.chamber}")

    if report.legislation.local_bills:
        lines.append("--- LOCAL BILLS ---")
        for bill in report.legislation.local_bills[:BILL_DISPLAY_LIMIT]:
            lines.append(f"{bill.number}: {bill.title or NO_TITLE}")

    return lines
