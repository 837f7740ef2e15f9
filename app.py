"""
app.py
──────
Spare-Part Insights — command-line entry point.

Sequence:
  1. Load the spare-part (catalog) record and, optionally, the installation
     override and client records from JSON files
  2. Resolve effective parameters and compute health, losses, production
  3. Print the machine insight as JSON

Usage:
    python app.py catalog.json --override override.json --client client.json --costs
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from config.settings import settings
from insights.analytics.insight import build_insight
from insights.data.loader import load_catalog_entry, load_client, load_json, load_override

logger = logging.getLogger("insights")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spare-part-insights",
        description="Health, fiber loss and power loss for one installed spare part.",
    )
    p.add_argument("catalog", help="Spare-part catalog record (JSON)")
    p.add_argument("--override", default=None, help="Client-machine-spare-part record (JSON)")
    p.add_argument("--client", default=None, help="Client record (JSON)")
    p.add_argument("--costs", action="store_true", help="Include monetary totals")
    p.add_argument(
        "--zero-overrides",
        action="store_true",
        help="Treat an explicit zero in the override as a real value",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    catalog = load_catalog_entry(load_json(args.catalog))
    override = load_override(load_json(args.override)) if args.override else None
    client = load_client(load_json(args.client)) if args.client else None
    logger.info(f"Computing insight for '{catalog.name or args.catalog}'")

    insight = build_insight(
        catalog,
        override,
        client,
        include_costs=args.costs,
        zero_is_unset=False if args.zero_overrides else None,
    )
    print(json.dumps(insight.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
