"""
Command line interface.

    myclient get http://localhost:4000 -q user=andrew
    myclient post http://localhost:4000 -d '{"version": "2.0.0"}'
    myclient version --set 1.2.3
"""

import argparse
import json
import sys
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, List, Optional, Tuple

from . import api
from .client import VersionClient
from .core.exceptions import UnexpectedResponseError
from .core.logging import LoggingConfig, configure_logging
from .core.outcome import Result, is_error


def _pair(separator: str):
    def parse(value: str) -> Tuple[str, str]:
        if separator not in value:
            raise argparse.ArgumentTypeError(f"expected NAME{separator}VALUE, got {value!r}")
        name, _, rest = value.partition(separator)
        return name.strip(), rest.strip()
    return parse


def _json_body(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON body: {e}")


def format_body(body: Any) -> str:
    """Render a decoded body for the terminal."""
    if isinstance(body, ET.Element):
        return ET.tostring(body, encoding="unicode")
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, (bytes, bytearray)):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, Enum):
        return str(body.value)
    return str(body)


def print_result(result: Result) -> int:
    status, body = result
    label = "error" if is_error(status) else str(status)
    print(label)
    text = format_body(body)
    if text:
        print(text)
    return 0 if result.ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="myclient",
        description="Send a request and print the decoded response",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  myclient get http://localhost:4000 -q user=andrew
  myclient post http://localhost:4000 -d '{"version": "2.0.0"}'
  myclient post http://localhost:4000 -d '{"a": "o ne"}' -H "Content-Type: application/x-www-form-urlencoded"
  myclient version --base-url http://localhost:4000 --set 1.2.3
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log requests and responses to stderr"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    get_cmd = commands.add_parser("get", help="Send a GET request")
    get_cmd.add_argument("url")
    get_cmd.add_argument(
        "-q", "--query",
        action="append", default=[], type=_pair("="), metavar="NAME=VALUE",
        help="Query parameter (repeatable)"
    )
    get_cmd.add_argument(
        "-H", "--header",
        action="append", default=[], type=_pair(":"), metavar="'NAME: VALUE'",
        help="Request header (repeatable)"
    )

    post_cmd = commands.add_parser("post", help="Send a POST request")
    post_cmd.add_argument("url")
    post_cmd.add_argument(
        "-d", "--data",
        type=_json_body, default=None, metavar="JSON",
        help="Request body as JSON"
    )
    post_cmd.add_argument(
        "-H", "--header",
        action="append", default=[], type=_pair(":"), metavar="'NAME: VALUE'",
        help="Request header (repeatable)"
    )

    version_cmd = commands.add_parser("version", help="Read or set the service version")
    version_cmd.add_argument("--base-url", default=None)
    version_cmd.add_argument("--set", dest="new_version", default=None, metavar="VERSION")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        configure_logging(LoggingConfig.create(level="DEBUG", format="text"))

    if args.command == "get":
        return print_result(api.get(args.url, dict(args.query), args.header))

    if args.command == "post":
        return print_result(api.post(args.url, args.data, args.header))

    client = VersionClient(base_url=args.base_url)
    try:
        if args.new_version is not None:
            print(client.next_version(args.new_version))
        else:
            print(client.current_version())
    except UnexpectedResponseError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
