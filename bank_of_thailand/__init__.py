"""
Python client for the Bank of Thailand (BOT) statistics API.

    from bank_of_thailand import create_client

    client = create_client(api_token="your-token")
    holidays = client.financial_holidays.list(year=2025)
    rates = client.exchange_rate.daily(start_period="2025-01-01", end_period="2025-01-31")
    rates.missing_dates
"""

from bank_of_thailand.client import BOTClient, create_client
from bank_of_thailand.core.config import Settings, load_settings
from bank_of_thailand.core.errors import BOTError, ErrorKind
from bank_of_thailand.domain.response import Change, DailyChange, Response, Trend

__version__ = "0.1.0"

__all__ = [
    "BOTClient",
    "create_client",
    "Settings",
    "load_settings",
    "BOTError",
    "ErrorKind",
    "Response",
    "Change",
    "DailyChange",
    "Trend",
]
