# recommender/cli.py
"""
Command line entry point.

    ennvas-rcm serve MINIMUM_UTILITY RESULT_LIMIT [--host HOST] [--port PORT]
    ennvas-rcm rank  MINIMUM_UTILITY RESULT_LIMIT REQUEST_JSON

Both ranking arguments are validated here (non-negative integers) so the
service and the ranking engine can assume they are valid.
"""

from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from recommender.api.v1.schemas.reco import ProductListOut, ProductOut, RcmRequest
from recommender.core.logging import configure_logging
from recommender.domain.services.ranking_svc import rank

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ennvas-rcm", description="Utility ranking recommender")
    sub = ap.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("minimum_utility", type=_non_negative_int)
    serve.add_argument("result_limit", type=_non_negative_int)
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8080)

    rank_cmd = sub.add_parser("rank", help="Rank a request JSON file and print the result")
    rank_cmd.add_argument("minimum_utility", type=_non_negative_int)
    rank_cmd.add_argument("result_limit", type=_non_negative_int)
    rank_cmd.add_argument("request", type=Path, help='JSON file: {"query": {...}, "products": [...]}')
    return ap


def rank_file(path: Path, minimum_utility: int, limit: int) -> ProductListOut:
    request = RcmRequest.model_validate_json(path.read_text(encoding="utf-8"))
    ranked = rank(
        [p.to_domain() for p in request.products],
        request.query.to_domain(),
        minimum_utility,
        limit,
    )
    return ProductListOut(products=[ProductOut.from_domain(p) for p in ranked])


def _serve(args: argparse.Namespace) -> int:
    import uvicorn
    from recommender.core.config import get_settings

    os.environ["MINIMUM_UTILITY"] = str(args.minimum_utility)
    os.environ["RESULT_LIMIT"] = str(args.result_limit)
    get_settings.cache_clear()

    uvicorn.run("recommender.main:app", host=args.host, port=args.port)
    return 0


def _rank(args: argparse.Namespace) -> int:
    try:
        result = rank_file(args.request, args.minimum_utility, args.result_limit)
    except OSError as e:
        logger.error("Cannot read request file %s: %s", args.request, e)
        return 2
    except ValidationError as e:
        logger.error("Invalid request file %s: %s", args.request, e)
        return 2
    print(result.model_dump_json(exclude_none=True, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=logging.WARNING if args.command == "rank" else logging.INFO)
    if args.command == "serve":
        return _serve(args)
    return _rank(args)


if __name__ == "__main__":
    sys.exit(main())
