"""
Booking Locks

Per-company mutual exclusion for the reload, re-check and insert sequence of
quote confirmation and cancellation. Two confirmations for the same company
in this process never interleave, so a car cannot be booked twice for
overlapping periods.

Usage:
  from services.booking_locks import company_locks
  with company_locks(["Hertz", "Dockx"]):
      # reload aggregates, confirm, commit
      ...
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterable

_registry_lock = threading.Lock()
_company_locks: Dict[str, threading.Lock] = {}


def get_company_lock(company_name: str) -> threading.Lock:
    """Lock guarding one company's reservations (created on first use)."""
    with _registry_lock:
        lock = _company_locks.get(company_name)
        if lock is None:
            lock = threading.Lock()
            _company_locks[company_name] = lock
        return lock


@contextmanager
def company_locks(company_names: Iterable[str]):
    """
    Hold the locks of several companies.

    Locks are taken in sorted name order so sessions spanning the same
    companies cannot deadlock.
    """
    locks = [get_company_lock(name) for name in sorted(set(company_names))]
    acquired = []
    try:
        for lock in locks:
            lock.acquire()
            acquired.append(lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()
