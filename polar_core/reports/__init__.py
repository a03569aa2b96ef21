from .display import display_report, display_key_status

__all__ = [
    "display_report",
    "display_key_status",
]
