"""Utility functions for farmstats."""

from farmstats.utils.date_parser import parse_date
from farmstats.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
