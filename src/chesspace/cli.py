"""
chesspace CLI: print a move-by-move clock schedule for a time control.

Usage:
    chesspace 90 30                      # classical 90+30 over 40 moves
    chesspace 3 2 --lichess -m 60 -d 5   # blitz, show every 5th move
    chesspace 15 10 --opening 10         # opening moves played twice as fast
    chesspace 60 0 -o 10 -p 50           # half the time for the first 10 moves
    chesspace 90 30 --config pace.json   # defaults from a JSON file

Values resolve with precedence: CLI arg if provided -> JSON config -> settings default.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .calculator import calculate
from .config import SETTINGS, Settings
from .report import render_json, render_text
from .timecontrol import ConfigurationError, TimeControlSpec

log = logging.getLogger("chesspace")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="chesspace", description="Calculates timestamps to pace yourself in a chess game.")
    ap.add_argument("minutes", type=int, help="Time control start time in minutes")
    ap.add_argument("increment", type=int, help="Increment in seconds")
    ap.add_argument("-m", "--moves", "-r", "--rounds", dest="moves", type=int, default=None,
                    help=f"Moves to be played (default: {SETTINGS.default_moves})")
    ap.add_argument("-l", "--lichess", action="store_true", help="lichess (doesn't apply increment at first move)")
    ap.add_argument("-d", "--display", type=int, default=None,
                    help=f"Display every <display> move (default: {SETTINGS.default_display})")
    ap.add_argument("-p", "--percentage", type=int, default=None,
                    help="Use <percentage> of total time for the opening (if skipped, opening moves are played twice as fast as normal ones)")
    ap.add_argument("-o", "--opening", type=int, default=None, help="Number of moves considered to be opening moves")
    # Misc
    ap.add_argument("--config", default=None, help="Optional JSON config file to load defaults from.")
    ap.add_argument("--json", action="store_true", help="Print the plan and schedule as JSON")
    ap.add_argument("--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)")
    return ap


def load_json_config(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"could not read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"config {path} must contain a JSON object")
    return data


def _as_int(name: str, value: Any) -> Optional[int]:
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer (got {value!r})") from None
    raise ConfigurationError(f"{name} must be an integer (got {value!r})")


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("1", "true", "yes", "0", "false", "no", ""):
        return value.strip().lower() in ("1", "true", "yes")
    raise ConfigurationError(f"{name} must be true or false (got {value!r})")


def resolve_spec(args: argparse.Namespace, cfg_dict: dict, settings: Settings = SETTINGS) -> TimeControlSpec:
    def pick(key: str, default=None):
        v = getattr(args, key, None)
        if v is not None:
            return v
        if cfg_dict.get(key) is not None:
            return cfg_dict[key]
        # "rounds" is accepted as an alias for "moves" in config files too
        if key == "moves" and cfg_dict.get("rounds") is not None:
            return cfg_dict["rounds"]
        return default

    return TimeControlSpec(
        starting_minutes=_as_int("minutes", args.minutes),
        increment_seconds=_as_int("increment", args.increment),
        total_moves=_as_int("moves", pick("moves", default=settings.default_moves)),
        lichess_mode=args.lichess or _as_bool("lichess", cfg_dict.get("lichess", False)),
        display_interval=_as_int("display", pick("display", default=settings.default_display)),
        opening_moves=_as_int("opening", pick("opening")),
        opening_percentage=_as_int("percentage", pick("percentage")),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg_dict = load_json_config(args.config) if args.config else {}
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # Logging setup
    log_level = str(args.log_level or cfg_dict.get("log_level") or SETTINGS.log_level).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, log_level, logging.WARNING))

    try:
        spec = resolve_spec(args, cfg_dict, SETTINGS)
    except ConfigurationError as e:
        log.debug("Rejected time control: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    log.info("Pacing %s over %d moves", spec.label(), spec.total_moves)
    result = calculate(spec)
    sys.stdout.write(render_json(result) if args.json else render_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
