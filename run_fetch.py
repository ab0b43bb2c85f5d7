"""CLI entry point.

This script aggregates opportunities from all built-in sources, applies the
given filters, and writes the search response to disk as JSON.

Examples:
    python run_fetch.py --out opportunities.json
    python run_fetch.py --out remote.json --remote-only --limit 10
    python run_fetch.py --category nonprofit --location boston --query data
    python run_fetch.py --skills "python,data analysis" --offset 10 --limit 10
    python run_fetch.py --categories

The output is the service response: {"opportunities": [...], "totalCount": n},
or {"categories": [...]} with --categories.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from opportunity_radar.config import Settings
from opportunity_radar.errors import FilterValidationError
from opportunity_radar.logging_setup import configure_logging
from opportunity_radar.models import CATEGORIES, COMPENSATIONS
from opportunity_radar.service import OpportunityRadarService

logger = logging.getLogger("opportunity_radar.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = Settings.from_env()
    p = argparse.ArgumentParser(description="Aggregate and search opportunities from multiple sources.")
    p.add_argument("--out", type=str, default="opportunities.json", help="Output JSON file path.")
    p.add_argument("--query", type=str, default=None, help="Free-text match on title, description or organization.")
    p.add_argument("--category", choices=CATEGORIES, default=None)
    p.add_argument("--location", type=str, default=None, help="Location substring; remote opportunities always match.")
    p.add_argument("--compensation", choices=COMPENSATIONS, default=None)
    remote = p.add_mutually_exclusive_group()
    remote.add_argument("--remote-only", dest="is_remote", action="store_const", const=True, default=None)
    remote.add_argument("--on-site-only", dest="is_remote", action="store_const", const=False)
    p.add_argument(
        "--skills",
        type=str,
        default=None,
        help="Comma-separated skills; an opportunity matches if it lists any of them.",
    )
    p.add_argument("--offset", type=int, default=0, help="Number of matches to skip.")
    p.add_argument("--limit", type=int, default=settings.default_limit, help="Max opportunities to output.")
    p.add_argument(
        "--timeout",
        type=float,
        default=settings.source_timeout_s,
        help="Per-source fetch timeout in seconds.",
    )
    p.add_argument("--categories", action="store_true", help="Write the per-category summary instead.")
    p.add_argument("--log-level", type=str, default=settings.log_level)
    return p.parse_args(argv)


def build_params(args: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "query": args.query,
        "category": args.category,
        "location": args.location,
        "compensation": args.compensation,
        "isRemote": args.is_remote,
        "skills": args.skills,
        "offset": args.offset or None,
        "limit": args.limit,
    }
    return {k: v for k, v in params.items() if v is not None}


async def run(args: argparse.Namespace) -> Dict[str, Any]:
    settings = Settings(source_timeout_s=args.timeout, log_level=args.log_level)
    service = OpportunityRadarService(settings=settings)
    if args.categories:
        return await service.categories()
    return await service.search(build_params(args))


def main(argv: Optional[List[str]] = None) -> int:
    # .env in the working directory fills in unset OPPORTUNITY_RADAR_* variables
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        data = asyncio.run(run(args))
    except FilterValidationError as exc:
        logger.error("%s", exc)
        return 2
    except ValidationError as exc:
        logger.error("invalid settings: %s", exc)
        return 2

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    if "opportunities" in data:
        print(f"Wrote {len(data['opportunities'])} of {data['totalCount']} opportunities to: {out_path}")
    else:
        print(f"Wrote {len(data['categories'])} categories to: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
