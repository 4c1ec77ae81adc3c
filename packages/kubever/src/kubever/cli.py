"""kubever CLI entry point.

Usage:
    kubever resolve <request>           Resolve a version or label
    kubever is-ci <request>             Report whether a request targets a CI bucket
    kubever image-tag <version>         Sanitize a version for use as an image tag
    kubever fallback <client-version>   Show the offline fallback for a client version
    kubever version                     Show version
    kubever --version                   Show version (short)
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from kubever.bucket import is_ci_request
from kubever.client_version import derive_fallback_version
from kubever.config import load_config
from kubever.constants import __version__
from kubever.exceptions import KubeverException
from kubever.image_tag import sanitize_for_image_tag
from kubever.resolver import VersionResolver

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130


def _cmd_resolve(args: argparse.Namespace) -> int:
    config = load_config(args.config)

    overrides: dict[str, Any] = {}
    if args.bucket_url is not None:
        overrides["bucket_url"] = args.bucket_url
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.client_version is not None:
        overrides["client_version"] = args.client_version
    if overrides:
        config = replace(config, **overrides)

    with VersionResolver(config) as resolver:
        result = resolver.resolve_with_details(args.request)

    if not args.details:
        print(result.version)
        return EXIT_SUCCESS

    print(f"Request:    {result.request}")
    print(f"Version:    {result.version}")
    print(f"Image tag:  {result.image_tag}")
    print(f"CI build:   {'yes' if result.is_ci else 'no'}")
    print(f"Fallback:   {'yes' if result.fell_back else 'no'}")
    for url in result.hops:
        print(f"Fetched:    {url}")
    return EXIT_SUCCESS


def _cmd_is_ci(args: argparse.Namespace) -> int:
    print("true" if is_ci_request(args.request) else "false")
    return EXIT_SUCCESS


def _cmd_image_tag(args: argparse.Namespace) -> int:
    print(sanitize_for_image_tag(args.version))
    return EXIT_SUCCESS


def _cmd_fallback(args: argparse.Namespace) -> int:
    print(derive_fallback_version(args.client_version))
    return EXIT_SUCCESS


def _cmd_version(args: argparse.Namespace) -> int:
    print(f"kubever v{__version__}")
    return EXIT_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="kubever",
        description="Resolve Kubernetes release labels into canonical versions",
    )
    parser.add_argument("-V", "--version", action="version", version=f"kubever {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    resolve = subparsers.add_parser(
        "resolve", help="Resolve a version or label (stable, latest-1, ci/latest, ...)"
    )
    resolve.add_argument("request", help="Version request, e.g. stable-1 or ci/latest-1.10")
    resolve.add_argument("--bucket-url", help="Release bucket root (default: https://dl.k8s.io)")
    resolve.add_argument("--timeout", type=float, help="Fetch timeout in seconds (default: 10)")
    resolve.add_argument(
        "--client-version", help="Client version used when a label file is missing"
    )
    resolve.add_argument("--config", type=Path, help="Config file (default: ~/.config/kubever/config.yaml)")
    resolve.add_argument("--details", action="store_true", help="Show how the version was resolved")
    resolve.set_defaults(handler=_cmd_resolve)

    is_ci = subparsers.add_parser("is-ci", help="Report whether a request targets a CI bucket")
    is_ci.add_argument("request", help="Version request")
    is_ci.set_defaults(handler=_cmd_is_ci)

    image_tag = subparsers.add_parser("image-tag", help="Sanitize a version for use as an image tag")
    image_tag.add_argument("version", help="Version string")
    image_tag.set_defaults(handler=_cmd_image_tag)

    fallback = subparsers.add_parser(
        "fallback", help="Show the offline fallback version for a client version"
    )
    fallback.add_argument("client_version", metavar="client-version", help="Client semantic version")
    fallback.set_defaults(handler=_cmd_fallback)

    version = subparsers.add_parser("version", help="Show kubever version")
    version.set_defaults(handler=_cmd_version)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return an exit code.

    Returns:
        0 on success, 1 on resolution errors, 2 on usage errors,
        130 when interrupted.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if not getattr(args, "handler", None):
        parser.print_help()
        return EXIT_SUCCESS

    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return EXIT_CANCELLED
    except KubeverException as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
