# bulk_units/core/errors.py
"""
Typed errors for bulk unit setup.

Exports
-------
- BulkSetupError (base)
- SegmentError            parse-time rejection of one prompt segment
- SessionStateError       operation not allowed in the current session state
- DuplicateUnitsError, EmptyBatchError, UnitLimitExceededError   confirmation gates
- CONFIRM_ERRORS
- MAX_BATCH

Parsing never lets these escape: SegmentError is turned into a user-facing string
by the prompt parser. The session raises the confirmation gates directly.
"""

from __future__ import annotations

from collections.abc import Iterable

# Ceiling on the units a single range or count may expand to
MAX_BATCH = 1000

# =========================
# Exception types
# =========================


class BulkSetupError(RuntimeError):
    """Base class for bulk unit setup failures."""


class SegmentError(BulkSetupError):
    """A segment named an invalid or oversized range/count. str(exc) is user-facing."""


class SessionStateError(BulkSetupError):
    """The preview session cannot perform the requested operation right now."""


class DuplicateUnitsError(BulkSetupError):
    """Confirmation blocked: some identifiers collide with existing units or each other."""

    def __init__(self, indices: Iterable[int]):
        self.indices = sorted(indices)
        n = len(self.indices)
        super().__init__(f"{n} duplicate{'s' if n != 1 else ''}. Fix highlighted duplicates before confirming.")


class EmptyBatchError(BulkSetupError):
    """Confirmation blocked: no candidates left in the preview."""

    def __init__(self, message: str = "No units to add"):
        super().__init__(message)


class UnitLimitExceededError(BulkSetupError):
    """Confirmation blocked: existing + new units would pass the per-property maximum."""

    def __init__(self, total: int, limit: int):
        self.total = total
        self.limit = limit
        super().__init__(f"Total units would exceed {limit} limit. Reduce the range.")


# Selector tuple for grouped exception handling around confirm()
CONFIRM_ERRORS = (
    DuplicateUnitsError,
    EmptyBatchError,
    UnitLimitExceededError,
)


__all__ = [
    "MAX_BATCH",
    "BulkSetupError",
    "SegmentError",
    "SessionStateError",
    "DuplicateUnitsError",
    "EmptyBatchError",
    "UnitLimitExceededError",
    "CONFIRM_ERRORS",
]
