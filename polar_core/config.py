import copy
import os
from dataclasses import dataclass
from typing import Any, Optional

import yaml
from rich.console import Console

console = Console()

DEFAULT_CONFIG: dict[str, Any] = {
    "locality": {
        "congress": 118,
        "bill_pool_size": 100,
        "local_bill_limit": 10,
        "recent_vote_limit": 20,
        "vote_chamber": "house",
        "fetch_timeout": 60.0,
        "include_cosponsors": True,
    },
}

API_KEY_ENV_VARS: dict[str, str] = {
    "google_civic": "GOOGLE_CIVIC_API_KEY",
    "congress": "CONGRESS_API_KEY",
}


@dataclass(frozen=True)
class LocalityConfig:
    """Tunable limits for one locality report."""

    congress: int = 118
    bill_pool_size: int = 100
    local_bill_limit: int = 10
    recent_vote_limit: int = 20
    vote_chamber: str = "house"
    fetch_timeout: float = 60.0
    include_cosponsors: bool = True

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "LocalityConfig":
        data = data or {}
        defaults = DEFAULT_CONFIG["locality"]
        return cls(
            congress=int(data.get("congress", defaults["congress"])),
            bill_pool_size=int(data.get("bill_pool_size", defaults["bill_pool_size"])),
            local_bill_limit=int(data.get("local_bill_limit", defaults["local_bill_limit"])),
            recent_vote_limit=int(data.get("recent_vote_limit", defaults["recent_vote_limit"])),
            vote_chamber=data.get("vote_chamber", defaults["vote_chamber"]),
            fetch_timeout=float(data.get("fetch_timeout", defaults["fetch_timeout"])),
            include_cosponsors=bool(data.get("include_cosponsors", defaults["include_cosponsors"])),
        )


def merge_config(base: dict[str, Any], override: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Overlay ``override`` onto a copy of ``base``, recursing into nested dicts."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = "config.yaml") -> dict[str, Any]:
    """
    From config.yaml, merged over DEFAULT_CONFIG

    Args:
        config_path: Path to config file (default: config.yaml)

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f)
    except FileNotFoundError:
        console.print(f"[yellow]Warning: {config_path} not found. Using default config.[/yellow]")
        return copy.deepcopy(DEFAULT_CONFIG)

    if user_config is not None and not isinstance(user_config, dict):
        console.print(f"[red]Error: {config_path} is not a mapping. Using default config.[/red]")
        return copy.deepcopy(DEFAULT_CONFIG)

    return merge_config(DEFAULT_CONFIG, user_config)


def get_api_keys() -> dict[str, str]:
    return {name: os.getenv(env_var, "") for name, env_var in API_KEY_ENV_VARS.items()}


def api_key_status() -> dict[str, bool]:
    """Configured/missing flag per upstream source."""
    return {name: bool(key) for name, key in get_api_keys().items()}
