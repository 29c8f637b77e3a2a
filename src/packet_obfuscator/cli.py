"""CLI interface for packet-obfuscator, called by the support-packet collector.

Usage:
    # Obfuscate every config/log file of a collected packet, in place
    python -m packet_obfuscator.cli dir /tmp/mm-support-packet

    # Obfuscate plain text (stdin: text, stdout: obfuscated text)
    echo 'login from 10.0.0.7' | python -m packet_obfuscator.cli text

    # Obfuscate a JSON config (stdin: JSON, stdout: obfuscated JSON)
    python -m packet_obfuscator.cli json < config.json

Set MM_SUP_NO_OBFUSCATE=true (or pass --no-obfuscate) to leave data as is.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys

from .config import CONFIG_ENV, DISABLE_ENV, create_obfuscator, env_flag, load_config, load_from_yaml
from .errors import DirectoryError

logger = logging.getLogger(__name__)


def _build_obfuscator(args: argparse.Namespace):
    config = load_from_yaml(args.config) if args.config else load_config({})
    if args.no_obfuscate:
        config["enabled"] = False
    if args.allow_list:
        config["allow_list"] |= set(args.allow_list.split(","))
    return create_obfuscator(config), config


def cmd_dir(args: argparse.Namespace) -> int:
    """Obfuscate a directory of collected files in place."""
    obfuscator, config = _build_obfuscator(args)
    pattern = args.pattern or config["pattern"]
    try:
        report = obfuscator.obfuscate_directory(args.directory, pattern)
    except DirectoryError as exc:
        logger.error("Failed to obfuscate sensitive data. Error: %s", exc)
        return 1

    json.dump(report.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_text(args: argparse.Namespace) -> int:
    """Obfuscate plain text on stdin."""
    obfuscator, _ = _build_obfuscator(args)
    sys.stdout.write(obfuscator.obfuscate_text(sys.stdin.read()))
    return 0


def cmd_json(args: argparse.Namespace) -> int:
    """Obfuscate a JSON document on stdin."""
    obfuscator, config = _build_obfuscator(args)
    try:
        data = json.loads(sys.stdin.read())
    except ValueError as exc:
        logger.error("Failed to parse JSON input. Error: %s", exc)
        return 1
    json.dump(obfuscator.obfuscate_data(data), sys.stdout, indent=config["json_indent"], ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="packet_obfuscator",
        description="Obfuscate sensitive data in support packet files",
    )
    parser.add_argument("--config", default=os.environ.get(CONFIG_ENV), help="YAML config file")
    parser.add_argument(
        "--no-obfuscate", action="store_true", default=env_flag(DISABLE_ENV),
        help=f"Disable obfuscation (env: {DISABLE_ENV})",
    )
    parser.add_argument("--allow-list", default="", help="Comma-separated values to never obfuscate")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--debug", action="store_true", help="Shortcut for --log-level DEBUG")

    sub = parser.add_subparsers(dest="command", required=True)
    p_dir = sub.add_parser("dir", help="Obfuscate files in a directory, in place")
    p_dir.add_argument("directory")
    p_dir.add_argument("--pattern", default=None, help="File pattern (accepted, not filtered on)")
    sub.add_parser("text", help="Obfuscate plain text (stdin)")
    sub.add_parser("json", help="Obfuscate a JSON document (stdin)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "dir": cmd_dir,
        "text": cmd_text,
        "json": cmd_json,
    }
    return cmds[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
