"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
from datetime import datetime


def format_display_date(value: Optional[datetime], fmt: str = "{month}/{day}/{year}") -> str:
    """
    Render a stored timestamp for display.

    ``fmt`` is a str.format template with ``year``, ``month`` and ``day``
    fields, so the default reads like a US short date (``3/7/2026``).
    A missing value renders as an empty string.
    """
    if value is None:
        return ""
    return fmt.format(year=value.year, month=value.month, day=value.day)


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
