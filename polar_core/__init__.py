# Polar Metrics Core Library
# Main entry point: from polar_core import get_local_political_data, render_report

from .config import load_config, get_api_keys, api_key_status, LocalityConfig
from .locality import (
    LocalityService,
    build_locality_service,
    get_local_political_data,
    resolve_district,
    match_representatives,
    correlate_bills,
    compile_report,
    render_report,
)

from .models import (
    Official,
    Office,
    DistrictInfo,
    Term,
    LegislatorRecord,
    Bill,
    Vote,
    FetchOutcome,
    OutcomeStatus,
    LocalPoliticalReport,
)

from .exceptions import (
    PolarMetricsError,
    UpstreamUnavailableError,
    APIKeyMissingError,
    InvalidAddressError,
    ReportCompilationError,
)

__all__ = [
    # Main entry points
    "get_local_political_data",
    "render_report",
    "build_locality_service",
    "LocalityService",
    # Stages
    "resolve_district",
    "match_representatives",
    "correlate_bills",
    "compile_report",
    # Config
    "load_config",
    "get_api_keys",
    "api_key_status",
    "LocalityConfig",
    # Models
    "Official",
    "Office",
    "DistrictInfo",
    "Term",
    "LegislatorRecord",
    "Bill",
    "Vote",
    "FetchOutcome",
    "OutcomeStatus",
    "LocalPoliticalReport",
    # Errors
    "PolarMetricsError",
    "UpstreamUnavailableError",
    "APIKeyMissingError",
    "InvalidAddressError",
    "ReportCompilationError",
]
