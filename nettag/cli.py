#!/usr/bin/env python3
"""
Command line access to the NetTag settings of one server instance.

    python -m nettag show
    python -m nettag get trackedExtensions
    python -m nettag set enableThumbnailCache true
    python -m nettag check-filename "foo/bar" --subdir
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from nettag.config import ConfigService, is_valid_filename
from nettag.constants import DEFAULT_INSTANCE_NAME, ENV_INSTANCE_NAME
from nettag.core.exceptions import NetTagError
from nettag.logger import init_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nettag", description="Inspect and update NetTag server settings")
    parser.add_argument(
        "--instance", "-i",
        default=os.environ.get(ENV_INSTANCE_NAME, DEFAULT_INSTANCE_NAME),
        help="Server instance name (default: $INSTANCE_NAME or %(default)s)"
    )
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON")
    parser.add_argument("--log-level", default=None, help="Root log level")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Print every setting's resolved value")
    commands.add_parser("keys", help="List setting names")

    get_cmd = commands.add_parser("get", help="Print one setting's resolved value")
    get_cmd.add_argument("key")

    set_cmd = commands.add_parser("set", help="Validate and persist a setting")
    set_cmd.add_argument("key")
    set_cmd.add_argument("value", help="New value as JSON text")

    check_cmd = commands.add_parser("check-filename", help="Test a path fragment against the filename rules")
    check_cmd.add_argument("name")
    check_cmd.add_argument("--subdir", action="store_true", help="Allow subdirectories")
    check_cmd.add_argument("--no-interchangeable-slashes", dest="interchangeable_slashes",
                           action="store_false", help="Treat '\\' as an ordinary character")
    check_cmd.add_argument("--windows", action="store_true", default=None, help="Force Windows rules")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = init_logger(json_logs=args.json_logs, log_level=args.log_level)

    if args.command == "check-filename":
        valid = is_valid_filename(args.name, args.subdir, args.interchangeable_slashes, args.windows)
        print("valid" if valid else "invalid")
        return 0 if valid else 1

    logger.bind_context(instance=args.instance)
    try:
        config = ConfigService.instantiate(args.instance)

        if args.command == "keys":
            for key in config.registry.get_keys():
                print(key)
        elif args.command == "show":
            for key, entry in config.snapshot().items():
                print(json.dumps({"key": key, **entry}))
        elif args.command == "get":
            print(json.dumps(config.get(args.key)))
        elif args.command == "set":
            try:
                value = json.loads(args.value)
            except json.JSONDecodeError as e:
                print(f"Value is not valid JSON: {e}", file=sys.stderr)
                return 2
            config.set(args.key, value)
        return 0
    except NetTagError as e:
        print(str(e), file=sys.stderr)
        return 1
    finally:
        logger.unbind("instance")


if __name__ == "__main__":
    sys.exit(main())
