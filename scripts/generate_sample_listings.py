#!/usr/bin/env python3
"""Generate sample property listings.

Listings are saved through an in-memory ``PropertyStore`` (so every
slug is unique) and then written to ``properties.json`` or printed to
the console.
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from listings.config import ListingsConfig
from listings.generators import PropertyGenerator
from listings.logging import get_logger, setup_logging
from listings.models import format_price
from listings.seeding import seed_properties
from listings.sinks import ConsoleSink, JsonFileSink
from listings.store import PropertyStore

logger = get_logger(__name__)


def parse_args(config: ListingsConfig, argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options, defaulting to environment config."""
    parser = argparse.ArgumentParser(description="Generate sample property listings")
    parser.add_argument(
        "--count",
        type=int,
        default=config.generator.count,
        help=f"Number of listings to generate (default: {config.generator.count})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument("--featured", action="store_true", help="Generate featured listings only")
    parser.add_argument("--sold", action="store_true", help="Mark every listing as sold")
    parser.add_argument("--for-rent", action="store_true", help="Generate rental listings only")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help=f"Directory for properties.json (default: {config.output.json_output_dir})",
    )
    parser.add_argument("--console", action="store_true", help="Print to stdout instead of a file")
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    config = ListingsConfig.from_env()
    args = parse_args(config, argv)
    setup_logging(args.log_level)
    config.apply()

    generator = PropertyGenerator(seed=args.seed, locale=config.generator.locale)
    if args.featured:
        generator = generator.featured()
    if args.sold:
        generator = generator.sold()
    if args.for_rent:
        generator = generator.for_rent()

    t0 = time.perf_counter()
    store = PropertyStore()
    properties = seed_properties(generator, store, args.count)
    logger.info("Generated %d listings in %.2fs", len(properties), time.perf_counter() - t0)

    if properties:
        total = sum(record.price or 0 for record in properties)
        logger.info(
            "Average asking price: %s",
            format_price(total / len(properties)),
        )

    sink = ConsoleSink(pretty=args.pretty) if args.console else JsonFileSink(args.output_dir, args.pretty)
    sink.write_batch("properties", properties)
    sink.close()


if __name__ == "__main__":
    main()
