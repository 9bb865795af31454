# fleetlink/utils/locks.py
"""
Per-vehicle mutual exclusion for the booking check-then-insert sequence.

Sync FastAPI routes run in a threadpool, so two booking requests for the same
vehicle can interleave inside one worker. vehicle_lock() serializes them.
Cross-worker serialization comes from the SELECT ... FOR UPDATE in
booking_service; this registry only covers the current process.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Optional

from fleetlink.config import settings
from fleetlink.utils.errors import ConflictError
from fleetlink.utils.logger import get_logger

logger = get_logger(__name__)

_locks: Dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


def _lock_for(vehicle_id: str) -> threading.Lock:
    with _registry_lock:
        lock = _locks.get(vehicle_id)
        if lock is None:
            lock = threading.Lock()
            _locks[vehicle_id] = lock
        return lock


@contextmanager
def vehicle_lock(vehicle_id: str, timeout: Optional[float] = None):
    """Hold the lock for one vehicle. Raises ConflictError if it stays busy past timeout."""
    wait = settings.BOOKING_LOCK_TIMEOUT_SECONDS if timeout is None else timeout
    lock = _lock_for(vehicle_id)
    if not lock.acquire(timeout=wait):
        logger.warning(f"Vehicle {vehicle_id} busy for {wait}s, booking rejected")
        raise ConflictError("Vehicle is busy with another booking, please retry")
    try:
        yield
    finally:
        lock.release()
