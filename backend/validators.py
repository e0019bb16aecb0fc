"""Input validation for the form submission endpoint"""
from typing import Any, Dict, Mapping, Optional

from core.config import get_spreadsheet_ids

USER_TYPES = ('buy', 'sell', 'rent')


class ValidationError(Exception):
    """Custom validation error"""
    pass


def validate_form_payload(data: Any) -> Dict[str, Any]:
    """Ensure the submitted body is a JSON object"""
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def resolve_spreadsheet_id(user_type: Any, spreadsheet_ids: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the spreadsheet id for a user type.

    Args:
        user_type: The submitted `userType` value
        spreadsheet_ids: Optional override of the user type -> sheet id map
    """
    if spreadsheet_ids is None:
        spreadsheet_ids = get_spreadsheet_ids()

    if not user_type or not isinstance(user_type, str) or user_type not in USER_TYPES:
        raise ValidationError('Invalid or missing user type')

    spreadsheet_id = spreadsheet_ids.get(user_type)
    if not spreadsheet_id:
        raise ValidationError('Invalid or missing user type')
    return spreadsheet_id
