# bulk_cli.py

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from bulk_units.core.logging_utils import get_debug_logger
from bulk_units.core.session import BulkSetupSession, example_prompts
from bulk_units.inputs.inputs import ConfigLoader
from bulk_units.schemas.labels import unit_type_label


def _parse_existing(val: str | None) -> list[str]:
    if not val:
        return []
    return [v.strip() for v in val.split(",") if v.strip()]


def _read_prompt(args: argparse.Namespace) -> str:
    if args.prompt is not None:
        return str(args.prompt)
    if args.file:
        p = Path(args.file)
        if not p.exists():
            raise SystemExit(f"prompt file not found: {p}")
        return p.read_text(encoding="utf-8")
    return sys.stdin.read()


def _build_parser() -> argparse.ArgumentParser:
    examples = "\n".join(f"  {e}" for e in example_prompts(False) + example_prompts(True))
    p = argparse.ArgumentParser(
        description="Bulk unit/bed setup preview",
        epilog=f"Prompt examples (separate groups with ';' or new lines):\n{examples}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--prompt", type=str, default=None, help="Prompt text (default: --file, else stdin)")
    p.add_argument("--file", type=str, default=None, help="Read the prompt from a text file")
    p.add_argument("--config", type=str, default=None, help="JSON config (max_total_units, shared_occupancy, ...)")
    p.add_argument("--shared", type=int, choices=(0, 1), default=None, help="Bed-by-bed (student housing) mode")
    p.add_argument("--existing", type=str, default=None, help="Comma-separated unit numbers already on the property")
    p.add_argument("--max-units", type=int, default=None, help="Per-property ceiling on existing + new units")
    p.add_argument("--show-all", type=int, choices=(0, 1), default=0, help="Print every preview row")
    p.add_argument("--json", type=int, choices=(0, 1), default=0, help="Emit the preview as JSON")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    get_debug_logger()

    loader = ConfigLoader()
    try:
        cfg = loader.load(args.config)
        cfg = loader.with_overrides(
            cfg,
            max_total_units=args.max_units,
            shared_occupancy=None if args.shared is None else bool(args.shared),
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2

    session = BulkSetupSession(existing_identifiers=_parse_existing(args.existing), config=cfg)
    session.generate(_read_prompt(args))
    dups = session.duplicates

    if args.json:
        payload = {
            "candidates": [c.model_dump(mode="json") for c in session.candidates],
            "errors": session.errors,
            "duplicates": sorted(dups),
            "summary": session.summary(),
        }
        print(json.dumps(payload, indent=2))
    else:
        for err in session.errors:
            print(f"error: {err}")
        if session.candidates:
            parts = ", ".join(f"{n} {label}" for label, n in session.summary().items())
            print(f"Generating {len(session.candidates)} {session.noun}: {parts}")
            if dups:
                print(f"{len(dups)} duplicate{'s' if len(dups) != 1 else ''}")
            for i, c in enumerate(session.visible_candidates(show_all=bool(args.show_all))):
                flag = " !dup" if i in dups else ""
                print(
                    f"{c.identifier:>10}  {c.size:>5} sqft  {unit_type_label(c.unit_type):<7} "
                    f"{c.bedrooms} bd  {c.bathrooms} ba"
                    f"{'  shared' if c.is_shared else ''}{'  own-washroom' if c.independent_washroom else ''}"
                    f"{'  ' + c.notes if c.notes else ''}{flag}"
                )
            hidden = len(session.candidates) - len(session.visible_candidates(show_all=bool(args.show_all)))
            if hidden > 0:
                print(f"... {hidden} more (use --show-all 1)")

    return 0 if session.can_confirm else 1


if __name__ == "__main__":
    raise SystemExit(main())
