from .resolver import resolve_district, district_info_from_civic, district_from_offices
from .matcher import match_representatives
from .correlator import correlate_bills
from .report import compile_report, render_report
from .service import (
    LocalityService,
    build_locality_service,
    get_local_political_data,
)

__all__ = [
    "resolve_district",
    "district_info_from_civic",
    "district_from_offices",
    "match_representatives",
    "correlate_bills",
    "compile_report",
    "render_report",
    "LocalityService",
    "build_locality_service",
    "get_local_political_data",
]
