import os
from typing import Any, Optional

import httpx
from rich.console import Console

from polar_core.api.http import get_json
from polar_core.exceptions import APIKeyMissingError, UpstreamUnavailableError

console = Console()

CIVIC_SOURCE: str = "Google Civic"
CIVIC_BASE_URL: str = "https://civicinfo.googleapis.com/civicinfo/v2"


def fetch_civic_data(
    address: str,
    api_key: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> dict[str, Any]:
    """
    Look up officials and offices for an address.

    Args:
        address: Free-text address
        api_key: Google Civic key (GOOGLE_CIVIC_API_KEY when None)
        client: Optional httpx client

    Returns:
        Raw civic response ({"normalizedInput", "offices", "officials", ...})
    """
    api_key = api_key if api_key is not None else os.getenv("GOOGLE_CIVIC_API_KEY", "")
    if not api_key:
        console.print("[yellow] Google Civic API key not configured[/yellow]")
        raise APIKeyMissingError(CIVIC_SOURCE)

    console.print(f"[dim]  Looking up civic data for {address}...[/dim]")

    data = get_json(
        CIVIC_SOURCE,
        f"{CIVIC_BASE_URL}/representatives",
        params={"address": address, "key": api_key},
        client=client,
    )
    if not isinstance(data, dict):
        raise UpstreamUnavailableError(CIVIC_SOURCE, "unexpected response shape")
    return data
