"""
Domain module - Response analytics
"""

from bank_of_thailand.domain.response import (
    Change,
    DailyChange,
    Response,
    Trend,
    extract_data,
)

__all__ = [
    "Change",
    "DailyChange",
    "Response",
    "Trend",
    "extract_data",
]
