"""
Locality Service - address to LocalPoliticalReport.

Pipeline:
1. Civic lookup, bill roster and recent votes are fetched concurrently
2. AddressResolver reads {state, district} from the civic response
3. Legislator roster is fetched for the resolved state
4. RepresentativeMatcher -> LegislationCorrelator -> ReportCompiler

Every upstream fetch is injected and guarded: a failure or timeout becomes a
FAILED FetchOutcome, is logged, and the stage that needed it sees empty data.
Only an empty address or a failure inside the stages themselves is raised.
"""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, Optional

from polar_core.api.civic import fetch_civic_data
from polar_core.api.congress import fetch_members, fetch_recent_bills, fetch_recent_votes
from polar_core.config import DEFAULT_CONFIG, LocalityConfig, get_api_keys
from polar_core.exceptions import InvalidAddressError, ReportCompilationError
from polar_core.locality.correlator import correlate_bills
from polar_core.locality.matcher import match_representatives
from polar_core.locality.report import compile_report
from polar_core.locality.resolver import district_info_from_civic
from polar_core.models import DistrictInfo, FetchOutcome, LocalPoliticalReport, OutcomeStatus
from polar_core.normalize import normalize_bills, normalize_legislators, normalize_votes

logger = logging.getLogger(__name__)

CIVIC_LOOKUP = "civic lookup"
LEGISLATOR_ROSTER = "legislator roster"
BILL_ROSTER = "bill roster"
RECENT_VOTES = "recent votes"

FETCH_WORKERS: int = 4

# Fetch capabilities, all synchronous; the service runs them off the event loop
CivicLookup = Callable[[str], Optional[dict[str, Any]]]
LegislatorRoster = Callable[[int, Optional[str], Optional[str]], Iterable[Any]]   # (congress, state, chamber)
BillRoster = Callable[[int, int], Iterable[Any]]                                 # (congress, limit)
RecentVotes = Callable[[int, Optional[str], int], Iterable[Any]]                 # (congress, chamber, limit)


def _materialize(fetch: Callable[..., Any], *args: Any) -> Any:
    """Call ``fetch`` and drain a lazy result, both on the worker thread."""
    data = fetch(*args)
    if data is not None and not isinstance(data, (dict, list)):
        data = list(data)
    return data


def validate_address(address: Any) -> str:
    if not isinstance(address, str) or not address.strip():
        raise InvalidAddressError("Address is required")
    return address.strip()


class LocalityService:
    """
    Builds a LocalPoliticalReport for one address per call.

    Holds only its collaborators and config; every call creates fresh
    intermediate values, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        civic_lookup: CivicLookup,
        legislator_roster: LegislatorRoster,
        bill_roster: BillRoster,
        recent_votes: RecentVotes,
        config: Optional[LocalityConfig] = None,
    ):
        self.civic_lookup = civic_lookup
        self.legislator_roster = legislator_roster
        self.bill_roster = bill_roster
        self.recent_votes = recent_votes
        self.config = config or LocalityConfig()

    async def _guarded_fetch(
        self,
        executor: ThreadPoolExecutor,
        source: str,
        fetch: Callable[..., Any],
        *args: Any,
    ) -> FetchOutcome:
        """Run one fetch on the request's executor with the configured timeout."""
        timeout = self.config.fetch_timeout
        loop = asyncio.get_running_loop()
        try:
            data = await asyncio.wait_for(
                loop.run_in_executor(executor, _materialize, fetch, *args),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("%s timed out after %.1fs", source, timeout)
            return FetchOutcome.failure(source, f"timed out after {timeout}s")
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("%s unavailable: %s", source, e)
            return FetchOutcome.failure(source, e)

        outcome = FetchOutcome.success(source, data)
        if outcome.status is OutcomeStatus.EMPTY:
            logger.info("%s returned no data", source)
        return outcome

    async def _fetch_roster(self, executor: ThreadPoolExecutor, district_info: DistrictInfo) -> FetchOutcome:
        if not district_info.state:
            logger.info("No state resolved; skipping %s", LEGISLATOR_ROSTER)
            return FetchOutcome.success(LEGISLATOR_ROSTER, [])
        return await self._guarded_fetch(
            executor, LEGISLATOR_ROSTER, self.legislator_roster,
            self.config.congress, district_info.state, None,
        )

    async def aget_local_political_data(self, address: str) -> LocalPoliticalReport:
        """
        Args:
            address: Free-text address

        Returns:
            LocalPoliticalReport, possibly with empty sections

        Raises:
            InvalidAddressError: address is empty
            ReportCompilationError: a stage failed on data it could not interpret
        """
        address = validate_address(address)
        cfg = self.config
        logger.info("Getting local political data for: %s", address)

        # Per-request pool; timed-out workers are abandoned, never joined
        executor = ThreadPoolExecutor(max_workers=FETCH_WORKERS, thread_name_prefix="locality-fetch")
        try:
            civic, bills, votes = await asyncio.gather(
                self._guarded_fetch(executor, CIVIC_LOOKUP, self.civic_lookup, address),
                self._guarded_fetch(executor, BILL_ROSTER, self.bill_roster, cfg.congress, cfg.bill_pool_size),
                self._guarded_fetch(
                    executor, RECENT_VOTES, self.recent_votes,
                    cfg.congress, cfg.vote_chamber, cfg.recent_vote_limit,
                ),
            )

            try:
                district_info = district_info_from_civic(civic.data_or(None))
            except Exception as e:
                raise ReportCompilationError(f"Unable to read civic data for {address}: {e}") from e

            if civic.status is OutcomeStatus.SUCCESS and not district_info.is_resolved:
                logger.info("No Representative office found for %s", address)
            logger.debug("District info: state=%s district=%s", district_info.state, district_info.district)

            roster = await self._fetch_roster(executor, district_info)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        try:
            local_reps = match_representatives(
                district_info.state,
                district_info.district,
                normalize_legislators(roster.data_or([])),
            )
            local_bills = correlate_bills(
                local_reps,
                normalize_bills(bills.data_or([])),
                cfg.local_bill_limit,
            )
            report = compile_report(
                address,
                district_info,
                local_reps,
                local_bills,
                normalize_votes(votes.data_or([])),
            )
        except Exception as e:
            raise ReportCompilationError(f"Unable to compile report for {address}: {e}") from e

        logger.debug(
            "Compiled report: %d representatives, %d bills",
            report.summary.total_local_reps, report.summary.total_local_bills,
        )
        return report

    def get_local_political_data(self, address: str) -> LocalPoliticalReport:
        """Synchronous wrapper around aget_local_political_data."""
        return asyncio.run(self.aget_local_political_data(address))


def build_locality_service(
    config: Optional[dict[str, Any]] = None,
    api_keys: Optional[dict[str, str]] = None,
) -> LocalityService:
    """Wire the Google Civic and Congress.gov fetchers into a LocalityService."""
    locality = LocalityConfig.from_dict((config or DEFAULT_CONFIG).get("locality"))
    keys = api_keys if api_keys is not None else get_api_keys()
    civic_key = keys.get("google_civic", "")
    congress_key = keys.get("congress", "")

    def civic_lookup(address: str) -> dict[str, Any]:
        return fetch_civic_data(address, api_key=civic_key)

    def legislator_roster(congress: int, state: Optional[str] = None, chamber: Optional[str] = None):
        return fetch_members(congress, api_key=congress_key, state=state, chamber=chamber)

    def bill_roster(congress: int, limit: int):
        return fetch_recent_bills(
            congress, limit, api_key=congress_key,
            include_cosponsors=locality.include_cosponsors,
        )

    def recent_votes(congress: int, chamber: Optional[str], limit: int):
        return fetch_recent_votes(congress, api_key=congress_key, chamber=chamber, limit=limit)

    return LocalityService(
        civic_lookup=civic_lookup,
        legislator_roster=legislator_roster,
        bill_roster=bill_roster,
        recent_votes=recent_votes,
        config=locality,
    )


def get_local_political_data(address: str, config: Optional[dict[str, Any]] = None) -> LocalPoliticalReport:
    """Default entry point: environment API keys, config or DEFAULT_CONFIG."""
    return build_locality_service(config).get_local_political_data(address)
