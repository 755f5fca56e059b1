# bulk_units/core/session.py
"""
Preview/edit session for bulk unit setup.

State machine
-------------
    idle ──generate──▶ previewing ⇄ editing(row)
      ▲                    │
      └── confirm / cancel ┘

- generate() replaces any previous preview (last write wins).
- Edits are raw overwrites of a row; nothing is re-extracted.
- confirm() hands the whole list to on_confirm once, then resets to idle.
- cancel() drops prompt, candidates and errors, then resets to idle.
The duplicate set is recomputed from the current rows on every access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from pydantic import ValidationError

from bulk_units.core.duplicates import find_duplicates
from bulk_units.core.errors import (
    DuplicateUnitsError,
    EmptyBatchError,
    SessionStateError,
    UnitLimitExceededError,
)
from bulk_units.core.parse import NOTHING_PARSED, parse_bulk_prompt
from bulk_units.inputs.inputs import BulkSetupConfig
from bulk_units.schemas.labels import unit_type_label
from bulk_units.schemas.models import BulkUnitCandidate, ConfirmationReceipt, ParseResult

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[list[BulkUnitCandidate]], Any]

UNIT_EXAMPLES = (
    "101-150: studio, 500 sq ft, 1 bath",
    "151-200: 1-bed, 650 sq ft, 1 bath",
    "A1-A20: 2-bed, 900 sq ft, 2 bath",
)
BED_EXAMPLES = (
    "Bed 1-50: shared, 120 sq ft, 1 bath",
    "Bed 51-80: private, 200 sq ft, 1 bath, independent washroom",
    "101-120: 2-bed, 400 sq ft, 2 bath",
)


def example_prompts(shared_mode: bool) -> tuple[str, ...]:
    return BED_EXAMPLES if shared_mode else UNIT_EXAMPLES


class SessionState(str, Enum):
    idle = "idle"
    previewing = "previewing"
    editing = "editing"
    confirmed = "confirmed"
    cancelled = "cancelled"


class BulkSetupSession:
    """
    Owns the candidate list of one bulk setup dialog.

    Args:
        existing_identifiers: unit numbers already on the property (duplicate checks, ceiling).
        on_confirm: receives the final candidate list as one batch.
        config: ceiling, vocabulary and paging options.
    """

    def __init__(
        self,
        existing_identifiers: Sequence[str] = (),
        on_confirm: ConfirmCallback | None = None,
        config: BulkSetupConfig | None = None,
    ) -> None:
        self.config = config or BulkSetupConfig()
        self.existing_identifiers: list[str] = list(existing_identifiers)
        self._on_confirm = on_confirm

        self.prompt = ""
        self.candidates: list[BulkUnitCandidate] = []
        self.errors: list[str] = []
        self.state = SessionState.idle
        self.editing_index: int | None = None
        self.outcome: SessionState | None = None

    # ---------- Derived views ----------

    @property
    def shared_mode(self) -> bool:
        return self.config.shared_mode

    @property
    def noun(self) -> str:
        return "beds" if self.shared_mode else "units"

    @property
    def duplicates(self) -> set[int]:
        return find_duplicates(self.candidates, self.existing_identifiers)

    @property
    def total_units(self) -> int:
        return len(self.candidates) + len(self.existing_identifiers)

    @property
    def over_limit(self) -> bool:
        return self.total_units > self.config.max_total_units

    @property
    def can_confirm(self) -> bool:
        return bool(self.candidates) and not self.duplicates and not self.over_limit

    def summary(self) -> dict[str, int]:
        """Candidate count per unit-type label, in first-seen order."""
        out: dict[str, int] = {}
        for c in self.candidates:
            label = unit_type_label(c.unit_type)
            out[label] = out.get(label, 0) + 1
        return out

    def visible_candidates(self, show_all: bool = False) -> list[BulkUnitCandidate]:
        return list(self.candidates) if show_all else self.candidates[: self.config.rows_per_page]

    # ---------- Transitions ----------

    def generate(self, prompt: str) -> ParseResult:
        """Parse prompt into a fresh preview, replacing any previous one."""
        self.prompt = prompt
        self.editing_index = None
        self.outcome = None

        result = parse_bulk_prompt(prompt, self.shared_mode)
        if not result.candidates and (not result.errors or result.errors == [NOTHING_PARSED]):
            self.candidates = []
            self.errors = [NOTHING_PARSED]
            self.state = SessionState.idle
            logger.info("nothing to preview for prompt %r", prompt)
            return ParseResult(errors=list(self.errors))

        errors = list(result.errors)
        if len(result.candidates) + len(self.existing_identifiers) > self.config.max_total_units:
            errors.append(f"Total units would exceed {self.config.max_total_units} limit. Reduce the range.")

        self.candidates = result.candidates
        self.errors = errors
        self.state = SessionState.previewing
        logger.info("preview: %d %s, %d errors", len(self.candidates), self.noun, len(self.errors))
        return ParseResult(candidates=list(self.candidates), errors=list(self.errors))

    def begin_edit(self, index: int) -> BulkUnitCandidate:
        self._require_preview("edit")
        self._check_index(index)
        self.editing_index = index
        self.state = SessionState.editing
        return self.candidates[index]

    def end_edit(self) -> None:
        self._require_preview("end edit")
        self.editing_index = None
        self.state = SessionState.previewing

    def update(self, index: int, **fields: Any) -> BulkUnitCandidate:
        """
        Overwrite fields of one row. All fields are validated together; on failure the
        row is left unchanged.

        Raises:
            SessionStateError: no preview is open.
            IndexError: no such row.
            ValueError: unknown field name, or a value that fails validation.
        """
        self._require_preview("update")
        self._check_index(index)
        unknown = sorted(set(fields) - set(BulkUnitCandidate.model_fields))
        if unknown:
            raise ValueError(f"Unknown candidate field(s): {', '.join(unknown)}")

        current = self.candidates[index]
        try:
            updated = BulkUnitCandidate.model_validate({**current.model_dump(), **fields})
        except ValidationError as e:
            raise ValueError(f"Invalid value for row {index}:\n{e}") from e
        self.candidates[index] = updated
        return updated

    def remove(self, index: int) -> BulkUnitCandidate:
        self._require_preview("remove")
        self._check_index(index)
        removed = self.candidates.pop(index)
        if self.editing_index is not None:
            if self.editing_index == index:
                self.editing_index = None
                self.state = SessionState.previewing
            elif self.editing_index > index:
                self.editing_index -= 1
        return removed

    def confirm(self) -> ConfirmationReceipt:
        """
        Hand the preview to on_confirm as one batch and reset.

        Raises:
            SessionStateError: no preview is open.
            DuplicateUnitsError: some rows collide (see duplicates).
            EmptyBatchError: every row was removed.
            UnitLimitExceededError: existing + new rows exceed max_total_units.
        """
        self._require_preview("confirm")
        dups = self.duplicates
        if dups:
            raise DuplicateUnitsError(dups)
        if not self.candidates:
            raise EmptyBatchError(f"No {self.noun} to add")
        if self.over_limit:
            raise UnitLimitExceededError(self.total_units, self.config.max_total_units)

        batch = list(self.candidates)
        if self._on_confirm is not None:
            self._on_confirm(batch)

        receipt = ConfirmationReceipt(count=len(batch), message=f"{len(batch)} {self.noun} added successfully")
        logger.info(receipt.message)
        self._reset()
        self.outcome = SessionState.confirmed
        return receipt

    def cancel(self) -> None:
        logger.info("bulk setup cancelled (%d candidates dropped)", len(self.candidates))
        self._reset()
        self.outcome = SessionState.cancelled

    # ---------- Internals ----------

    def _reset(self) -> None:
        self.prompt = ""
        self.candidates = []
        self.errors = []
        self.editing_index = None
        self.state = SessionState.idle

    def _require_preview(self, action: str) -> None:
        if self.state not in (SessionState.previewing, SessionState.editing):
            raise SessionStateError(f"Cannot {action}: no preview is open (state={self.state.value}).")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.candidates):
            raise IndexError(f"No preview row {index} (have {len(self.candidates)}).")


__all__ = [
    "SessionState",
    "BulkSetupSession",
    "ConfirmCallback",
    "UNIT_EXAMPLES",
    "BED_EXAMPLES",
    "example_prompts",
]
