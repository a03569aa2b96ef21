import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

import httpx
from rich.console import Console

from polar_core.api.http import get_json
from polar_core.exceptions import APIKeyMissingError, UpstreamUnavailableError
from polar_core.normalize import terms_list

console = Console()

CONGRESS_SOURCE: str = "Congress.gov"
CONGRESS_BASE_URL: str = "https://api.congress.gov/v3"
MEMBER_PAGE_LIMIT: int = 250
MAX_MEMBER_PAGES: int = 10
BILL_PAGE_LIMIT: int = 250
MAX_DETAIL_WORKERS: int = 8  # parallel detail requests per bill roster
API_RATE_LIMIT_DELAY: float = 0.1


def _congress_key(api_key: Optional[str]) -> str:
    api_key = api_key if api_key is not None else os.getenv("CONGRESS_API_KEY", "")
    if not api_key:
        console.print("[yellow] Congress.gov API key not configured[/yellow]")
        raise APIKeyMissingError(CONGRESS_SOURCE)
    return api_key


def _latest_chamber(member: dict[str, Any]) -> str:
    terms = terms_list(member.get("terms"))
    if not terms:
        return ""
    return str(terms[-1].get("chamber") or "")


def fetch_members(
    congress: int,
    api_key: Optional[str] = None,
    state: Optional[str] = None,
    chamber: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> list[dict[str, Any]]:
    """
    Fetch the legislator roster of a congress, optionally for one state.

    Args:
        congress: Congress number (e.g., 118)
        api_key: Congress.gov key (CONGRESS_API_KEY when None)
        state: Two-letter state code
        chamber: "house" or "senate"; matched against each member's latest term
        client: Optional httpx client

    Returns:
        Raw member records in roster order
    """
    api_key = _congress_key(api_key)

    url = f"{CONGRESS_BASE_URL}/member/congress/{congress}"
    if state:
        url = f"{url}/{state.upper()}"
    params: dict[str, Any] = {"api_key": api_key, "format": "json", "limit": MEMBER_PAGE_LIMIT}

    console.print(f"[dim]  Fetching members of the {congress}th Congress{f' ({state.upper()})' if state else ''}...[/dim]")

    members: list[dict[str, Any]] = []
    next_url: Optional[str] = url
    pages = 0
    while next_url and pages < MAX_MEMBER_PAGES:
        data = get_json(CONGRESS_SOURCE, next_url, params=params, client=client)
        if not isinstance(data, dict):
            raise UpstreamUnavailableError(CONGRESS_SOURCE, "unexpected member list shape")
        members.extend(m for m in data.get("members", []) if isinstance(m, dict))

        # "next" already carries offset and limit
        next_url = (data.get("pagination") or {}).get("next")
        params = {"api_key": api_key, "format": "json"}
        pages += 1

    if chamber:
        wanted = chamber.lower()
        members = [m for m in members if wanted in _latest_chamber(m).lower()]

    return members


def _fetch_bill_detail(
    congress: int,
    bill: dict[str, Any],
    api_key: str,
    include_cosponsors: bool,
    client: Optional[httpx.Client],
) -> dict[str, Any]:
    """Detail record (with sponsors); the list record is returned when the detail call fails."""
    bill_type = str(bill.get("type", "")).lower()
    bill_number = bill.get("number")
    if not bill_type or not bill_number:
        return bill

    detail_url = f"{CONGRESS_BASE_URL}/bill/{congress}/{bill_type}/{bill_number}"
    params = {"api_key": api_key, "format": "json"}

    try:
        payload = get_json(CONGRESS_SOURCE, detail_url, params=params, client=client)
    except UpstreamUnavailableError as e:
        console.print(f"[yellow]    {bill_type.upper()} {bill_number}: no detail ({e}), skipping sponsors[/yellow]")
        return bill

    detail = payload.get("bill") if isinstance(payload, dict) else None
    if not isinstance(detail, dict):
        return bill

    merged = {**bill, **detail}
    if include_cosponsors:
        try:
            cosponsor_data = get_json(CONGRESS_SOURCE, f"{detail_url}/cosponsors", params=params, client=client)
        except UpstreamUnavailableError as e:
            console.print(f"[yellow]    {bill_type.upper()} {bill_number}: no cosponsors ({e})[/yellow]")
        else:
            if isinstance(cosponsor_data, dict):
                merged["cosponsors"] = cosponsor_data.get("cosponsors", [])

    return merged


def fetch_recent_bills(
    congress: int,
    limit: int = 100,
    api_key: Optional[str] = None,
    include_cosponsors: bool = True,
    client: Optional[httpx.Client] = None,
    rate_limit_delay: float = API_RATE_LIMIT_DELAY,
) -> list[dict[str, Any]]:
    """
    Fetch the most recently updated bills of a congress with their sponsors.

    The bill list does not carry sponsors, so each bill costs one detail
    request (two with cosponsors). Detail records carry only a cosponsor
    count, so cosponsor matching needs include_cosponsors. Up to
    MAX_DETAIL_WORKERS bills are detailed at once.

    Args:
        congress: Congress number (e.g., 118)
        limit: Number of bills to fetch
        api_key: Congress.gov key (CONGRESS_API_KEY when None)
        include_cosponsors: Also fetch each bill's cosponsor list
        client: Optional httpx client
        rate_limit_delay: Pause between detail requests

    Returns:
        Raw bill records, most recently updated first
    """
    api_key = _congress_key(api_key)

    console.print(f"\n[bold cyan]Fetching recent bills from {CONGRESS_SOURCE}...[/bold cyan]")

    data = get_json(
        CONGRESS_SOURCE,
        f"{CONGRESS_BASE_URL}/bill/{congress}",
        params={
            "api_key": api_key,
            "format": "json",
            "limit": min(limit, BILL_PAGE_LIMIT),
            "sort": "updateDate desc",
        },
        client=client,
    )
    if not isinstance(data, dict):
        raise UpstreamUnavailableError(CONGRESS_SOURCE, "unexpected bill list shape")

    listed = [b for b in data.get("bills", []) if isinstance(b, dict)][:limit]

    def _detail(bill: dict[str, Any]) -> dict[str, Any]:
        merged = _fetch_bill_detail(congress, bill, api_key, include_cosponsors, client)
        if rate_limit_delay:
            time.sleep(rate_limit_delay)
        return merged

    # map() keeps list order; detail requests overlap across workers
    with ThreadPoolExecutor(max_workers=MAX_DETAIL_WORKERS) as executor:
        bills = list(executor.map(_detail, listed))

    console.print(f"[green]✓ Fetched {len(bills)} bills from {CONGRESS_SOURCE}[/green]")
    return bills


def fetch_recent_votes(
    congress: int,
    api_key: Optional[str] = None,
    chamber: Optional[str] = "house",
    limit: int = 20,
    client: Optional[httpx.Client] = None,
) -> list[dict[str, Any]]:
    """
    Fetch recent roll call votes.

    Congress.gov only publishes House roll calls; asking for the Senate
    raises UpstreamUnavailableError.
    """
    if chamber and chamber.lower() != "house":
        raise UpstreamUnavailableError(CONGRESS_SOURCE, f"{chamber} roll call votes are not published")

    api_key = _congress_key(api_key)

    data = get_json(
        CONGRESS_SOURCE,
        f"{CONGRESS_BASE_URL}/house-vote/{congress}",
        params={"api_key": api_key, "format": "json", "limit": limit},
        client=client,
    )
    if not isinstance(data, dict):
        raise UpstreamUnavailableError(CONGRESS_SOURCE, "unexpected vote list shape")

    return [v for v in data.get("houseRollCallVotes", []) if isinstance(v, dict)][:limit]
