"""
Google Sheets client for appending lead form rows.

Credentials are parsed once when the routes are wired; the gspread client is
authorized lazily on the first request and reused for the process lifetime.
"""
import base64
import binascii
import json
import os
import threading
from typing import Any, Dict, List, Optional

from google.auth.transport.requests import Request
from google.oauth2 import service_account
import gspread
import gspread.exceptions

from core.config import (
    APPEND_RANGE,
    CREDENTIALS_ENV_VAR,
    DEFAULT_TOKEN_URI,
    INSERT_DATA_OPTION,
    SHEETS_SCOPES,
    VALUE_INPUT_OPTION,
)
from core.logger import logger

REQUIRED_CREDENTIAL_FIELDS = ('client_email', 'private_key')


class SheetsInitializationError(Exception):
    """Raised when the Google Sheets client cannot be created."""
    pass


def _decode_credentials_blob(raw: str) -> Dict[str, Any]:
    """Parse raw JSON, or base64-encoded JSON, into a dict."""
    raw = raw.strip()
    if not raw.startswith('{'):
        # Add padding if missing
        missing_padding = len(raw) % 4
        if missing_padding:
            raw += '=' * (4 - missing_padding)
        try:
            raw = base64.b64decode(raw, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"{CREDENTIALS_ENV_VAR} is neither JSON nor base64 encoded JSON") from e

    info = json.loads(raw)
    if not isinstance(info, dict):
        raise ValueError(f"{CREDENTIALS_ENV_VAR} must contain a JSON object")
    return info


def load_credentials(raw: Optional[str] = None) -> Optional[service_account.Credentials]:
    """
    Build service account credentials from configuration.

    Args:
        raw: Credential JSON; read from GOOGLE_APPLICATION_CREDENTIALS when omitted

    Returns None (after logging) if the blob is missing or unusable, so the
    failure surfaces on first use instead of at startup.
    """
    if raw is None:
        raw = os.getenv(CREDENTIALS_ENV_VAR, '{}')

    try:
        info = _decode_credentials_blob(raw)

        missing = [field for field in REQUIRED_CREDENTIAL_FIELDS if not info.get(field)]
        if missing:
            raise ValueError(f"Service account credentials missing fields: {', '.join(missing)}")

        info.setdefault('token_uri', DEFAULT_TOKEN_URI)
        credentials = service_account.Credentials.from_service_account_info(
            info,
            scopes=SHEETS_SCOPES
        )
        logger.info(f"Google credentials loaded for {info['client_email']}")
        return credentials
    except Exception as e:
        logger.error(f"Error initializing Google credentials: {str(e)}")
        return None


class SheetsClient:
    """Process-wide access to the Google Sheets API."""

    def __init__(self, credentials: Optional[service_account.Credentials]):
        self.credentials = credentials
        self._client: Optional[gspread.Client] = None
        self._init_lock = threading.Lock()

        # Opened spreadsheets keyed by id, avoids re-fetching metadata on every append
        self._spreadsheets_cache: Dict[str, gspread.Spreadsheet] = {}

    def get_client(self) -> gspread.Client:
        """Return the authorized gspread client, creating it on first call."""
        if self._client is not None:
            return self._client

        with self._init_lock:
            if self._client is not None:
                return self._client

            try:
                if self.credentials is None:
                    raise SheetsInitializationError("Google credentials not initialized")

                logger.info("Authorizing Google credentials...")
                self.credentials.refresh(Request())
                logger.info("Google credentials authorized successfully")

                self._client = gspread.authorize(self.credentials)
                logger.info("Google Sheets client initialized successfully")
            except Exception as e:
                logger.error(f"Error initializing Google Sheets client: {str(e)}", exc_info=True)
                raise SheetsInitializationError("Failed to initialize Google Sheets API") from e

        return self._client

    def _get_spreadsheet(self, spreadsheet_id: str) -> gspread.Spreadsheet:
        if spreadsheet_id in self._spreadsheets_cache:
            return self._spreadsheets_cache[spreadsheet_id]

        client = self.get_client()
        try:
            spreadsheet = client.open_by_key(spreadsheet_id)
        except gspread.exceptions.SpreadsheetNotFound:
            logger.error(f"Spreadsheet not found: {spreadsheet_id}")
            raise
        self._spreadsheets_cache[spreadsheet_id] = spreadsheet
        return spreadsheet

    def append_row(self, spreadsheet_id: str, row: List[str]) -> Dict[str, Any]:
        """
        Append one row to a spreadsheet.

        Args:
            spreadsheet_id: Target spreadsheet key
            row: Cell values, written from column A

        Returns:
            The Sheets API append response
        """
        spreadsheet = self._get_spreadsheet(spreadsheet_id)
        try:
            return spreadsheet.values_append(
                APPEND_RANGE,
                params={
                    'valueInputOption': VALUE_INPUT_OPTION,
                    'insertDataOption': INSERT_DATA_OPTION,
                },
                body={'values': [row]}
            )
        except gspread.exceptions.APIError as e:
            logger.error(f"Sheets API error appending to {spreadsheet_id}: {str(e)}", exc_info=True)
            raise
