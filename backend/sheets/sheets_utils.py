"""
Public facade for Google Sheets helper utilities.

Routes import from here rather than from the individual helper modules.
"""

from sheets.sheets_client import SheetsClient, SheetsInitializationError, load_credentials
from sheets.sheets_values import (
    FIXED_FIELDS,
    build_row,
    normalize_value,
    submission_timestamp,
)

__all__ = [
    "SheetsClient",
    "SheetsInitializationError",
    "load_credentials",
    "FIXED_FIELDS",
    "build_row",
    "normalize_value",
    "submission_timestamp",
]
