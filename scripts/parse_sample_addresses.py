#!/usr/bin/env python3
"""Generate sample VIES addresses, parse them and save the results.

For every supported country the script renders addresses in the layout
VIES uses, runs them through ``parse_address`` and writes one JSON file
with the raw text, the parsed fields and any error.

Configuration is read from the environment (``LOG_LEVEL``, ``LOG_FORMAT``,
``VIES_IGNORE_GREEK``); command line flags override it.
"""

import argparse
import json
import sys
from collections import Counter
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vies_parser.config import ViesParserConfig
from vies_parser.generators.address import ViesAddressFactory
from vies_parser.logging import get_logger, setup_logging
from vies_parser.parser import parse_address
from vies_parser.sinks.serialization import serialize_value

logger = get_logger(__name__)


def build_records(factory: ViesAddressFactory, per_country: int, config: ViesParserConfig) -> list[dict]:
    """Generate and parse ``per_country`` addresses for each country."""
    records = []
    for raw in factory.generate_all(per_country=per_country):
        parsed, error = parse_address(raw.country.value, raw.text, config.parsing)
        records.append(
            {
                "country": raw.country,
                "address": raw.text,
                "parsed": parsed,
                "error": error,
            }
        )
    return records


def save_json(records: list[dict], filepath: Path) -> None:
    """Save records to a JSON file."""
    serialized = [serialize_value(record) for record in records]
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(serialized, f, indent=2, ensure_ascii=False)
    logger.info("Saved %d records to %s", len(records), filepath)


def print_summary(records: list[dict]) -> None:
    """Print per-country outcome counts."""
    outcomes: Counter[tuple[str, str]] = Counter()
    for record in records:
        if record["error"] is not None:
            outcome = type(record["error"]).__name__
        elif record["parsed"].is_empty:
            outcome = "empty"
        else:
            outcome = "parsed"
        outcomes[(record["country"].value, outcome)] += 1

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for (country, outcome), count in sorted(outcomes.items()):
        print(f"{country:4}{outcome + ':':30}{count}")
    print("=" * 60)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate sample VIES addresses and parse them"
    )
    parser.add_argument(
        "--per-country",
        type=int,
        default=5,
        help="Number of addresses per country (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "local" / "parsed_addresses.json",
        help="Output JSON file (default: local/parsed_addresses.json)",
    )
    parser.add_argument(
        "--ignore-greek",
        action="store_true",
        help="Keep Greek addresses in Greek script",
    )
    args = parser.parse_args()

    config = ViesParserConfig.from_env()
    if args.ignore_greek:
        config.parsing = replace(config.parsing, ignore_greek=True)
    setup_logging(config.log_level, config.log_format)

    factory = ViesAddressFactory(seed=args.seed)
    records = build_records(factory, args.per_country, config)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    save_json(records, args.output)
    print_summary(records)


if __name__ == "__main__":
    main()
