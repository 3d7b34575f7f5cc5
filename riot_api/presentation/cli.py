"""``riot-api`` command line entry point."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Optional, Tuple

import httpx

from riot_api.config import settings
from riot_api.core.logging import bootstrap_logging, get_logger, shutdown_logging
from riot_api.domain.entities import RiotModel
from riot_api.domain.enums import Region
from riot_api.domain.exceptions import ConfigurationError, RiotAPIError
from riot_api.infrastructure import RiotAPIClient

log = get_logger(__name__, service="cli")

Handler = Callable[[RiotAPIClient, argparse.Namespace], Any]

# (resource, method) -> (positional argument spec, call)
_COMMANDS: Dict[Tuple[str, str], Tuple[str, Handler]] = {
    ("summoner", "name"):      ("name", lambda api, a: api.summoner.name(a.name)),
    ("summoner", "id"):        ("summoner_id", lambda api, a: api.summoner.id(a.summoner_id)),
    ("summoner", "names"):     ("summoner_ids", lambda api, a: api.summoner.names(*a.summoner_ids)),
    ("summoner", "masteries"): ("summoner_id", lambda api, a: api.summoner.masteries(a.summoner_id)),
    ("summoner", "runes"):     ("summoner_id", lambda api, a: api.summoner.runes(a.summoner_id)),
    ("stats", "ranked"):       ("summoner_id", lambda api, a: api.stats.ranked(a.summoner_id, season=a.season)),
    ("stats", "summary"):      ("summoner_id", lambda api, a: api.stats.summary(a.summoner_id, season=a.season)),
    ("champions", "list"):     ("", lambda api, a: api.champions.list()),
    ("champions", "free"):     ("", lambda api, a: api.champions.free()),
    ("game", "recent"):        ("summoner_id", lambda api, a: api.game.recent(a.summoner_id)),
    ("league", "by-summoner"): ("summoner_id", lambda api, a: api.league.by_summoner(a.summoner_id)),
    ("team", "by-summoner"):   ("summoner_id", lambda api, a: api.team.by_summoner(a.summoner_id)),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="riot-api", description="Query the League of Legends API.")
    parser.add_argument(
        "--region",
        default=None,
        help=f"region code, one of {Region.valid_codes()} (default: RIOT_REGION)",
    )
    parser.add_argument("--debug", action="store_true", help="print each request line to stdout")
    parser.add_argument("--raise-errors", action="store_true", help="exit non-zero on HTTP error status")
    parser.add_argument("--log-level", default=None, help="log level for stderr logging (default: LOG_LEVEL)")

    resources = parser.add_subparsers(dest="resource", required=True)
    for resource in dict.fromkeys(r for r, _ in _COMMANDS):
        sub = resources.add_parser(resource)
        methods = sub.add_subparsers(dest="method", required=True)
        for (r, method), (positional, _) in _COMMANDS.items():
            if r != resource:
                continue
            cmd = methods.add_parser(method)
            if positional == "summoner_ids":
                cmd.add_argument(positional, nargs="+")
            elif positional:
                cmd.add_argument(positional)
            if resource == "stats":
                cmd.add_argument("--season", default=None, help="e.g. SEASON3")
    return parser


def to_jsonable(result: Any) -> Any:
    if isinstance(result, RiotModel):
        return result.to_dict()
    if isinstance(result, list):
        return [to_jsonable(r) for r in result]
    return result


def main(argv: list[str], *, transport: Optional[httpx.BaseTransport] = None) -> int:
    args = build_parser().parse_args(argv)
    bootstrap_logging(
        level=args.log_level or settings.LOG_LEVEL,
        console=settings.LOG_CONSOLE or bool(args.log_level),
        log_dir=settings.LOG_DIR,
    )
    try:
        _, handler = _COMMANDS[(args.resource, args.method)]
        try:
            overrides: Dict[str, Any] = {}
            if args.region:
                overrides["region"] = args.region
            if args.debug:
                overrides["debug"] = True
            if args.raise_errors:
                overrides["raise_status_errors"] = True
            if transport is not None:
                overrides["transport"] = transport
            settings.validate()
            api = RiotAPIClient.from_settings(settings, **overrides)
        except ConfigurationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        log.info(lambda: f"{args.resource} {args.method} on {api.region.code}")
        with api:
            try:
                result = handler(api, args)
            except RiotAPIError as exc:
                log.error(lambda: f"{args.resource} {args.method} failed: {exc}", extra={"status": exc.status_code})
                print(f"error: {exc}", file=sys.stderr)
                return 1

        log.success(lambda: f"{args.resource} {args.method} done")
        print(json.dumps(to_jsonable(result), indent=2, ensure_ascii=False))
        return 0
    finally:
        shutdown_logging()


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
