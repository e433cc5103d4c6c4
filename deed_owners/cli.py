"""
Command line entry point for deed_owners.

Modes:
  parse TEXT [TEXT ...]: parse raw owner/grantee strings
  history FILE: build owner history for property records stored as JSON

Results are written to stdout as JSON; logs go to stderr.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from deed_owners.config import extra_company_indicators
from deed_owners.exceptions import InvalidOwnerRecordError, OwnerRecordError
from deed_owners.services.company_classifier import COMPANY_INDICATORS
from deed_owners.services.owner_history import build_owner_history
from deed_owners.services.owner_parser import parse_owners
from deed_owners.utils.logging_config import configure_logger
from deed_owners.utils.logging_utils import Timer, log_owner_stats


def handle_parse(texts: list[str], indicators: frozenset[str]) -> Any:
    """Parse each raw text; a single text yields a single result object."""
    with Timer() as timer:
        results = [
            parse_owners(text, company_indicators=indicators).model_dump(mode="json")
            for text in texts
        ]
    for text, result in zip(texts, results):
        if result["invalids"]:
            logger.info(f"{len(result['invalids'])} unresolved fragment(s) in {text!r}")

    log_owner_stats(
        source="parse",
        owners=sum(len(r["owners"]) for r in results),
        invalids=sum(len(r["invalids"]) for r in results),
        duration_ms=timer.elapsed_ms,
        texts=len(texts),
    )
    return results[0] if len(results) == 1 else results


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load one property record or a list of records from a JSON file."""
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list):
        return payload
    raise InvalidOwnerRecordError(
        f"{path}: expected a record object or a list of records, got {type(payload).__name__}"
    )


def handle_history(path: Path, indicators: frozenset[str]) -> dict[str, Any]:
    """Build owner history for every record in the file."""
    output: dict[str, Any] = {}
    owners = invalids = 0

    with Timer() as timer:
        for record in load_records(path):
            history = build_owner_history(record, company_indicators=indicators)
            if history.property_key in output:
                logger.warning(f"Duplicate property id {history.property_id}; later record wins")
            output.update(history.to_output())
            counted = sum(len(v) for v in history.owners_by_date.values())
            owners += counted
            invalids += len(history.invalid_owners)
            log_owner_stats(
                source="history",
                owners=counted,
                invalids=len(history.invalid_owners),
                property_id=history.property_id,
            )

    log_owner_stats(
        source="history",
        owners=owners,
        invalids=invalids,
        duration_ms=timer.elapsed_ms,
        records=len(output),
    )
    return output


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deed-owners",
        description="Parse owner names from property and deed records",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL env or INFO)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation for output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse raw owner/grantee text")
    parse_cmd.add_argument("texts", nargs="+", help="Raw owner name text")

    history_cmd = subparsers.add_parser("history", help="Build owner history from a JSON records file")
    history_cmd.add_argument("file", type=Path, help="JSON file with property record(s)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logger(args.log_level)

    indicators = COMPANY_INDICATORS | extra_company_indicators()

    try:
        if args.command == "parse":
            result = handle_parse(args.texts, indicators)
        else:
            result = handle_history(args.file, indicators)
    except (OwnerRecordError, json.JSONDecodeError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        return 1

    print(json.dumps(result, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
