# bulk_units/core/duplicates.py

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bulk_units.schemas.models import BulkUnitCandidate


def _key(identifier: str) -> str:
    return identifier.strip().lower()


def find_duplicates(candidates: Sequence[BulkUnitCandidate], existing: Iterable[str] = ()) -> set[int]:
    """
    Indices of candidates whose identifier (case-insensitive) is already on the
    property or appeared at an earlier index. The first in-batch occurrence is only
    flagged when it collides with an existing unit.

    Example: existing ["101"], identifiers ["101", "102", "101"] → {0, 2}.
    """
    taken = {_key(e) for e in existing}
    seen: set[str] = set()
    dups: set[int] = set()
    for i, c in enumerate(candidates):
        key = _key(c.identifier)
        if key in taken or key in seen:
            dups.add(i)
        seen.add(key)
    return dups
