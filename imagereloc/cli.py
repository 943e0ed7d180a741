"""The ``irel`` command line: relocation of container image references."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from .name import InvalidReferenceError, parse_name
from .pathmapping import flatten_repo_path_preserve_tag_digest

__all__ = ["build_parser", "cli_version", "main"]

_VERSION = "unknown"
_GITSHA = "unknown sha"
_GITDIRTY = ""


def cli_version(version: str = _VERSION, gitsha: str = _GITSHA, gitdirty: str = _GITDIRTY) -> str:
    """Return a version string built from the release version and source state."""
    if gitdirty:
        return f"{version} ({gitsha}, with local modifications)"
    return f"{version} ({gitsha})"


def _comma_list(value: str) -> list[str]:
    return [item for item in value.split(",") if item]


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _run_map(args: argparse.Namespace) -> int:
    try:
        ref = parse_name(args.ref)
    except InvalidReferenceError as exc:
        print(f"invalid reference {_quote(args.ref)}: {exc}", file=sys.stderr)
        return 1
    try:
        mapped = flatten_repo_path_preserve_tag_digest(args.repository_prefix, ref)
    except InvalidReferenceError as exc:
        print(f"path flattening failed: {exc}", file=sys.stderr)
        return 1
    print(mapped)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``irel`` command."""
    parser = argparse.ArgumentParser(
        prog="irel", description="irel is a tool for relocating container images")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s version {cli_version()}",
        help="display CLI version")
    parser.add_argument(
        "--ca-cert-path", dest="ca_cert_paths", action="extend", type=_comma_list, default=[],
        help="Path to CA certificate for verifying registry TLS certificates "
             "(can be repeated for multiple certificates)")
    parser.add_argument(
        "--skip-tls-verify", action="store_true",
        help="Skip TLS certificate verification for registries")

    commands = parser.add_subparsers(dest="command")
    map_cmd = commands.add_parser(
        "map", help="Map an image reference to a relocated reference")
    map_cmd.add_argument("ref", metavar="REF")
    map_cmd.add_argument(
        "-r", "--repository-prefix", required=True,
        help="base value to which an image name is appended to create the full repository")
    map_cmd.set_defaults(handler=_run_map)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``irel`` command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())