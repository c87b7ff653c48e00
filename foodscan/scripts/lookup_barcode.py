#!/usr/bin/env python3
"""
Look up one barcode and print its dietary verdict.

Usage:
    python -m foodscan.scripts.lookup_barcode 8886467124723 --diet vegan

Exit codes:
    0 product found
    1 no data (not found or lookup failed)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from foodscan.application.product.resolver import lookup_product
from foodscan.config import load_settings
from foodscan.domain.dietary.models import DietaryProfile
from foodscan.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dietary verdict for a product barcode")
    parser.add_argument("barcode", help="Decoded barcode payload")
    parser.add_argument(
        "--diet",
        action="append",
        default=[],
        help="Declared diet (repeatable), e.g. --diet vegan",
    )
    parser.add_argument("--env-file", default=".env", help="Optional .env file")
    return parser


async def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)

    profile = DietaryProfile(diets=args.diet)
    result = await lookup_product(args.barcode, profile, settings=settings)
    if result is None:
        print(f"No product data available for {args.barcode}")
        return 1

    print(json.dumps(result.to_caller_dict(), indent=2, ensure_ascii=False))
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
