"""
Command line entry point.

Usage:
    youtube-live-creator [create] --title "My Stream" --start-time 2024-11-15T15:00:00.000Z
    youtube-live-creator auth [--reset]

The first run opens a browser for Google consent; the token is cached in
./credentials for later runs.
"""

import argparse
import logging
import sys
import traceback

from .app import authorize, connect
from .config import Config
from .errors import YouTubeLiveError
from .provisioner import PRIVACY_STATUSES, create_live_stream
from .utils.logger import get_logger, set_console_level

logger = get_logger("cli")

COMMANDS = ("create", "auth")
GLOBAL_FLAGS = ("-v", "--verbose")

DEFAULT_TITLE = "My Test Stream"
DEFAULT_DESCRIPTION = "This is a test live stream created via API"
DEFAULT_START_TIME = "2024-11-15T15:00:00.000Z"


def build_parser() -> argparse.ArgumentParser:
    # Accepted before or after the command; SUPPRESS keeps the subparser from resetting it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging on stderr"
    )

    parser = argparse.ArgumentParser(
        prog="youtube-live-creator",
        description="Create a YouTube live stream, schedule a broadcast, and bind them.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    sub =parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", parents=[common], help="Provision a stream and broadcast (default)")
    create.add_argument("--title", default=DEFAULT_TITLE)
    create.add_argument("--description", default=DEFAULT_DESCRIPTION)
    create.add_argument(
        "--start-time",
        default=DEFAULT_START_TIME,
        help="Scheduled start, RFC3339 (e.g. 2024-11-15T15:00:00.000Z)",
    )
    create.add_argument("--privacy", choices=PRIVACY_STATUSES, default="private")

    auth = sub.add_parser("auth", parents=[common], help="Authorize and cache the token only")
    auth.add_argument("--reset", action="store_true", help="Discard the cached token first")

    return parser


def _run_create(args, config: Config) -> None:
    print("Starting YouTube LiveStream Creator...")
    print("A browser window should open for authorization. Please follow the prompts.")

    client = connect(config, progress=print)
    result = create_live_stream(
        client,
        args.title,
        args.description,
        args.start_time,
        privacy_status=args.privacy,
    )
    print(result)


def _run_auth(args, config: Config) -> None:
    print("YouTube Authentication Helper")
    print("-" * 40)
    authorize(config, reset=args.reset, progress=print)
    print(f"\nToken cached in {config.credentials_dir.resolve()} for user '{config.user_id}'.")


def main(argv: list[str] | None = None, config: Config | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # No command after the global flags means "create"
    first = 0
    while first < len(argv) and argv[first] in GLOBAL_FLAGS:
        first += 1
    if first == len(argv) or argv[first] not in (*COMMANDS, "-h", "--help"):
        argv.insert(first, "create")

    args = build_parser().parse_args(argv)
    if args.verbose:
        set_console_level(logging.DEBUG)

    config = config or Config.from_env()

    try:
        if args.command == "auth":
            _run_auth(args, config)
        else:
            _run_create(args, config)
    except YouTubeLiveError as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
