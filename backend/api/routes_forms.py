"""
Lead form submission route.
"""
import json
from typing import Optional

from flask import Blueprint, jsonify, request

from core.logger import logger
from sheets.sheets_utils import SheetsClient, build_row
from validators import resolve_spreadsheet_id, validate_form_payload


def register_form_routes(
    api: Blueprint,
    sheets_client: Optional[SheetsClient],
) -> None:
    """Register the form submission route on the given blueprint."""

    @api.route("/submit-form", methods=["POST"])
    def submit_form():
        """
        Append a form submission to the sheet selected by `userType`.

        Every failure (bad JSON, invalid user type, auth or Sheets API errors)
        is reported as a 500 with the error message.
        """
        logger.info("Received form submission request")
        try:
            data = validate_form_payload(request.get_json(force=True))
            logger.debug(f"Received form data: {json.dumps(data, indent=2)}")

            user_type = data.get("userType")
            spreadsheet_id = resolve_spreadsheet_id(user_type)

            if not sheets_client:
                raise RuntimeError("Google Sheets client not configured")

            row = build_row(data)
            logger.info(f"Appending data to Google Sheet for {user_type}...")
            logger.debug(f"Preprocessed values: {json.dumps(row)}")

            response = sheets_client.append_row(spreadsheet_id, row)

            logger.info(f"Data successfully appended to Google Sheet for {user_type}")
            return jsonify({"success": True, "data": response}), 200
        except Exception as e:
            logger.error(f"Error in form submission: {str(e)}", exc_info=True)
            return (
                jsonify(
                    {
                        "success": False,
                        "error": "Internal Server Error",
                        "message": str(e) or "An unexpected error occurred",
                    }
                ),
                500,
            )
