# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""ReflectGuard CLI."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable
from typing import BinaryIO

from ..config import HttpSettings, load_http_settings, load_scan_settings
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import BatchResult
from ..runtime import ReflectGuard
from ..version import __version__

NO_URLS_MESSAGE = (
    "No URLs provided. Please either pipe URLs to the program or use the -l option to specify a file."
)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflectguard",
        description="Scan URLs for query parameters reflected verbatim as HTML tags or event handlers",
    )
    parser.add_argument(
        "-H",
        "--headers",
        action="append",
        default=[],
        metavar="HEADER",
        help='Custom header sent with every request, e.g. "Cookie: a=b" (repeatable)',
    )
    parser.add_argument(
        "-l",
        "--list",
        dest="url_list",
        metavar="FILE",
        help="File containing URLs (one per line); read from stdin when omitted",
    )
    parser.add_argument(
        "-t",
        "--threads",
        type=_positive_int,
        default=None,
        metavar="THREADS",
        help="Number of concurrent requests (default: 5)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of one line per URL",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def iter_url_lines(stream: BinaryIO) -> Iterable[str]:
    """Yield stripped, non-empty lines; lines that are not valid UTF-8 are skipped."""
    for raw in stream:
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            continue
        line = line.strip()
        if line:
            yield line


def load_urls(path: str | None) -> list[str]:
    if path is None:
        return list(iter_url_lines(sys.stdin.buffer))
    with open(path, "rb") as handle:
        return list(iter_url_lines(handle))


def _print_json(result: BatchResult) -> None:
    json.dump(result.to_dict(), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _print_lines(result: BatchResult) -> None:
    for line in result.lines():
        print(line)
    for error in result.task_errors:
        print(f"Task error: {error.url}: {error.error_type}: {error.message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        urls = load_urls(args.url_list)
    except OSError as exc:
        print(f"Error: cannot read URL list {args.url_list}: {exc}", file=sys.stderr)
        return 1

    if not urls:
        print(NO_URLS_MESSAGE)
        return 0

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None:
        settings.timeout = args.timeout

    threads = args.threads or load_scan_settings().concurrency
    if not args.json:
        print(f"Starting scan with {threads} threads for {len(urls)} URLs")

    http_client = create_default_http_client(settings)
    with ReflectGuard(http_client=http_client, headers=args.headers, concurrency=threads) as guard:
        result = guard.scan(urls)

    if args.json:
        _print_json(result)
    else:
        _print_lines(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
