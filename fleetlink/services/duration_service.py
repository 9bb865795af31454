# fleetlink/services/duration_service.py
"""
Ride duration estimate between two pincodes.
Stand-in for real routing: |to - from| % 24 hours. A difference that is a
multiple of 24 gives a zero-hour ride, and existing bookings rely on that.
"""

from datetime import datetime, timedelta

from fleetlink.utils.errors import ValidationError

HOURS_PER_DAY = 24


def estimate_duration(from_pincode, to_pincode) -> int:
    """Estimated ride duration in whole hours, always in [0, 23]."""
    return abs(int(to_pincode) - int(from_pincode)) % HOURS_PER_DAY


def compute_end_time(start_time: datetime, duration_hours: int) -> datetime:
    return start_time + timedelta(hours=duration_hours)


def ride_window(from_pincode, to_pincode, start_time: datetime) -> tuple[int, datetime]:
    """
    Duration plus end instant for a ride starting at start_time.
    Raises ValidationError if the ride would end after datetime.max.
    """
    hours = estimate_duration(from_pincode, to_pincode)
    try:
        return hours, compute_end_time(start_time, hours)
    except OverflowError:
        raise ValidationError(errors=[{"startTime": "Ride would end past the latest supported instant"}])
