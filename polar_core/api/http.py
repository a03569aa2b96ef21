from typing import Any, Optional

import httpx

from polar_core.exceptions import UpstreamUnavailableError

API_TIMEOUT: float = 30.0


def get_json(
    source: str,
    url: str,
    params: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
    client: Optional[httpx.Client] = None,
) -> Any:
    """
    GET a JSON document, raising UpstreamUnavailableError on any failure.

    Args:
        source: Upstream name used in error messages
        url: Absolute URL
        params: Query parameters, merged over any already in ``url``
        headers: Extra request headers
        client: Reused client; a short-lived one is opened when None
    """
    try:
        if client is not None:
            response = client.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()

        with httpx.Client(timeout=API_TIMEOUT) as http:
            response = http.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()

    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        raise UpstreamUnavailableError(source, f"HTTP {status_code}", status_code=status_code) from e
    except httpx.HTTPError as e:
        raise UpstreamUnavailableError(source, f"request failed: {e}") from e
    except ValueError as e:
        raise UpstreamUnavailableError(source, "response body is not valid JSON") from e
