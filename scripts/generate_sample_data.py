#!/usr/bin/env python3
"""Generate a sample property book file.

This script fills a PropertyBook with synthetic properties and buyers and
writes it as JSON. Defaults come from the PROPERTYBOOK_* environment
variables (see property_book.config).
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_book.config import PropertyBookConfig
from property_book.exceptions import DuplicateEntityError, PropertyBookError
from property_book.generators import BuyerGenerator, PropertyGenerator
from property_book.logging import get_logger, setup_logging
from property_book.storage import JsonBookStorage
from property_book.store import PropertyBook

logger = get_logger("property_book.scripts.generate_sample_data")


def build_book(
    num_properties: int,
    num_buyers: int,
    seed: int | None,
    locale: str,
) -> PropertyBook:
    """Generate a book, skipping generated entries whose identity repeats."""
    book = PropertyBook()
    property_gen = PropertyGenerator(seed=seed, locale=locale)
    buyer_gen = BuyerGenerator(seed=seed, locale=locale)

    for prop in property_gen.generate_batch(num_properties):
        try:
            book.add_property(prop)
        except DuplicateEntityError:
            logger.debug("Skipping duplicate property %s", prop.name)

    for buyer in buyer_gen.generate_batch(num_buyers):
        try:
            book.add_buyer(buyer)
        except DuplicateEntityError:
            logger.debug("Skipping duplicate buyer %s", buyer.name)

    return book


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = PropertyBookConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample property book")
    parser.add_argument(
        "--properties",
        type=int,
        default=config.sample_data.num_properties,
        help=f"Number of properties to generate (default: {config.sample_data.num_properties})",
    )
    parser.add_argument(
        "--buyers",
        type=int,
        default=config.sample_data.num_buyers,
        help=f"Number of buyers to generate (default: {config.sample_data.num_buyers})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=config.storage.data_file,
        help=f"Output file (default: {config.storage.data_file})",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.storage.pretty_json,
        help="Pretty-print the JSON output",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, format_type=config.log_format)

    book = build_book(args.properties, args.buyers, args.seed, config.sample_data.locale)
    try:
        JsonBookStorage(args.output, pretty=args.pretty).save(book)
    except PropertyBookError:
        logger.exception("Failed to write sample book")
        return 1

    summary = book.summary()
    print(f"Sample book written to: {args.output}")
    for entity_type, count in summary.items():
        print(f"  {entity_type}: {count} records")
    return 0


if __name__ == "__main__":
    sys.exit(main())
