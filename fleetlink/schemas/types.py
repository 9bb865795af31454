# fleetlink/schemas/types.py
"""
Shared field types for request/response schemas.
Validation here runs before any service is called, so services may assume
well-formed pincodes and UTC instants.
"""

import re
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, PlainSerializer

# Indian postal code: six digits, no leading zero, unassigned prefixes excluded
PINCODE_RE = re.compile(r"^(?!10|29|35|54|55|65|66|86|87|88|89)[1-9][0-9]{5}$")

# Integer columns are signed 32-bit on PostgreSQL
MAX_DB_INT = 2**31 - 1


def _check_pincode(value: str) -> str:
    value = value.strip()
    if not PINCODE_RE.match(value):
        raise ValueError("Invalid Indian pincode")
    return value


def _to_naive_utc(value: datetime) -> datetime:
    """Stored instants are naive UTC. Naive input is taken as UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _format_utc(value: datetime) -> str:
    return value.replace(tzinfo=timezone.utc).isoformat().replace("+00:00", "Z")


Pincode = Annotated[str, AfterValidator(_check_pincode)]
UtcInstant = Annotated[datetime, AfterValidator(_to_naive_utc)]
UtcTimestamp = Annotated[datetime, PlainSerializer(_format_utc, return_type=str)]
