"""
Form value normalization and spreadsheet row construction.
"""
import json
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

# Named fields written right after the timestamp, in column order
FIXED_FIELDS = (
    "name",
    "email",
    "phoneNumber",
    "budget",
    "typesOfHome",
    "bedrooms",
    "bathrooms",
    "location",
    "moveInDuration",
    "preApproved",
    "underContract",
)

DISCRIMINATOR_FIELD = "userType"


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    if isinstance(value, (list, tuple)):
        # Nested lists inside a list value are flattened to comma text
        return ",".join(_stringify(item) for item in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_value(value: Any) -> str:
    """
    Convert a single form value into a display string.

    Lists are joined with "; ", strings lose currency symbols and thousands
    separators, and missing values become an empty string.
    """
    if isinstance(value, (list, tuple)):
        return "; ".join(_stringify(item).strip() for item in value)
    if isinstance(value, str):
        return value.replace("$", "").replace(",", "").strip()
    return _stringify(value).strip()


def submission_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:30:00.000Z"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_row(form: Mapping[str, Any], submitted_at: Optional[datetime] = None) -> List[str]:
    """
    Build one spreadsheet row from a form submission.

    Args:
        form: Submitted fields, iterated in insertion order
        submitted_at: Submission time (defaults to now)
    """
    row = [submission_timestamp(submitted_at)]
    row.extend(normalize_value(form.get(field)) for field in FIXED_FIELDS)

    skipped = set(FIXED_FIELDS)
    skipped.add(DISCRIMINATOR_FIELD)
    for key, value in form.items():
        if key not in skipped:
            row.append(normalize_value(value))
    return row
