from .civic import fetch_civic_data
from .congress import fetch_members, fetch_recent_bills, fetch_recent_votes

__all__ = [
    "fetch_civic_data",
    "fetch_members",
    "fetch_recent_bills",
    "fetch_recent_votes",
]
