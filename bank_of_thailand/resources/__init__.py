"""
Resources module - Endpoint definitions

Each resource wraps one BOT API product and returns Response objects.
All resources inherit from BaseResource for consistent interface.
"""

from bank_of_thailand.resources.base import BaseResource
from bank_of_thailand.resources.exchange_rate import ExchangeRate
from bank_of_thailand.resources.average_exchange_rate import AverageExchangeRate
from bank_of_thailand.resources.debt_securities import DebtSecurities
from bank_of_thailand.resources.license_check import LicenseCheck
from bank_of_thailand.resources.deposit_rate import DepositRate
from bank_of_thailand.resources.loan_rate import LoanRate
from bank_of_thailand.resources.financial_holidays import FinancialHolidays
from bank_of_thailand.resources.interbank_rate import InterbankRate
from bank_of_thailand.resources.implied_rate import ImpliedRate
from bank_of_thailand.resources.swap_point import SwapPoint
from bank_of_thailand.resources.search_series import SearchSeries

ALL_RESOURCES = (
    ExchangeRate,
    AverageExchangeRate,
    DebtSecurities,
    LicenseCheck,
    DepositRate,
    LoanRate,
    FinancialHolidays,
    InterbankRate,
    ImpliedRate,
    SwapPoint,
    SearchSeries,
)

__all__ = [
    "BaseResource",
    "ExchangeRate",
    "AverageExchangeRate",
    "DebtSecurities",
    "LicenseCheck",
    "DepositRate",
    "LoanRate",
    "FinancialHolidays",
    "InterbankRate",
    "ImpliedRate",
    "SwapPoint",
    "SearchSeries",
    "ALL_RESOURCES",
]
