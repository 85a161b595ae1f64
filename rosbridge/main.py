"""Command-line helper for inspecting rosbridge time documents.

``rosbridge-time now`` prints the current clock reading as a time document;
``rosbridge-time parse '{"secs": 1}'`` validates a document and prints it with
both fields filled in.
"""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rosbridge.config.loader import load_config_or_default
from rosbridge.config.models import BridgeConfig
from rosbridge.core.enums import ClockSource
from rosbridge.core.errors import RosbridgeError
from rosbridge.primitives import Clock, Time
from rosbridge.telemetry import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rosbridge-time", description="Inspect rosbridge time documents.")
    parser.add_argument("--config", help="path to a YAML config file")
    commands = parser.add_subparsers(dest="command", required=True)

    now_cmd = commands.add_parser("now", help="print the current time")
    now_cmd.add_argument(
        "--source",
        choices=[source.value for source in ClockSource],
        help="override the configured clock source",
    )

    parse_cmd = commands.add_parser("parse", help="validate and normalize a time document")
    parse_cmd.add_argument("document", help='JSON text such as {"secs": 1, "nsecs": 5}')
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config_or_default(args.config)
    except RosbridgeError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logger = configure_logging(
        log_dir=config.telemetry.log_dir,
        level=config.telemetry.log_level,
        logger_name=config.telemetry.logger_name,
    )

    if args.command == "now":
        stamp = _clock_for(config, args.source).now()
        logger.debug("Read clock", extra={"source": args.source or config.clock.source.value})
        print(stamp.to_json_string())
        return 0

    try:
        stamp = Time.from_json_string(args.document)
    except RosbridgeError as exc:
        logger.warning("Rejected time document: %s", exc)
        print(f"Parse error: {exc}", file=sys.stderr)
        return 1
    print(stamp.to_json_string())
    return 0


def _clock_for(config: BridgeConfig, source: str | None) -> Clock:
    clock_config = config.clock
    if source is not None:
        clock_config = clock_config.model_copy(update={"source": ClockSource(source)})
    return Clock(clock_config)


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
