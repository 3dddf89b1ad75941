#!/usr/bin/env python3
"""
tunelink CLI - Classify and clean music links.

Usage:
    tunelink parse "https://soundcloud.com/artist/track?si=abc"
    tunelink parse "soundcloud.com/artist/sets/playlist/s-TOKEN" --json
    tunelink sanitize "https://soundcloud.com/artist/track?utm_source=clipboard"
    tunelink providers
    tunelink validate-config
"""

import argparse
import json
import logging
import sys

from tunelink.exceptions import ConfigError, InvalidMusicUrlError
from tunelink.parsers import create_registry


def _cmd_parse(args, registry):
    """Handle the parse subcommand."""
    try:
        result = registry.parse(args.url)
    except InvalidMusicUrlError as e:
        print(f"ERROR: {e.reason}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"Provider: {result.provider.value}")
    print(f"Type: {result.content_type.value}")
    print(f"Private: {'yes' if result.is_private else 'no'}")
    print(f"Sanitized: {result.sanitized_url}")
    for key, value in result.metadata.model_dump(exclude_none=True).items():
        print(f"  {key}: {value}")


def _cmd_sanitize(args, registry):
    """Handle the sanitize subcommand."""
    try:
        print(registry.sanitize(args.url))
    except InvalidMusicUrlError as e:
        print(f"ERROR: {e.reason}", file=sys.stderr)
        sys.exit(1)


def _cmd_providers(args, registry):
    """Handle the providers subcommand."""
    if not registry.providers:
        print("No providers registered.")
        return
    for parser in registry.get_parsers():
        name = getattr(parser, "display_name", parser.provider.value)
        domain = getattr(parser, "domain", "")
        print(f"  + {parser.provider.value}: {name} ({domain})")


def _cmd_validate_config(args):
    """Handle the validate-config subcommand.

    Every config file the loader reads is checked, project config first.
    """
    from tunelink.config.loader import (
        _find_config_files,
        _get_user_config_path,
        _load_yaml_config,
    )
    from tunelink.config.validation import validate_config

    config_files = _find_config_files()
    if not config_files:
        print("No config file found.")
        print("  Searched: .tunelink/config.yaml (project)")
        print(f"  Searched: {_get_user_config_path()} (user)")
        print("\nUsing defaults (no validation needed).")
        sys.exit(0)

    all_valid = True
    for config_path, source in config_files:
        print(f"Config file: {config_path} ({source.value})")

        yaml_config = _load_yaml_config(config_path)
        if yaml_config is None:
            print("  Failed to parse config file.")
            all_valid = False
            continue

        result = validate_config(yaml_config)

        if result.errors:
            print(f"\nErrors ({len(result.errors)}):")
            for error in result.errors:
                print(f"  x {error}")

        if result.warnings:
            print(f"\nWarnings ({len(result.warnings)}):")
            for warning in result.warnings:
                print(f"  ! {warning}")

        if result.is_valid and not result.warnings:
            print("\nConfig is valid.")
        elif result.is_valid:
            print(f"\nConfig is valid with {len(result.warnings)} warning(s).")
        else:
            print(
                f"\nConfig is invalid: {len(result.errors)} error(s), "
                f"{len(result.warnings)} warning(s)."
            )
            all_valid = False

    sys.exit(0 if all_valid else 1)


def main():
    parser = argparse.ArgumentParser(
        description="Classify and sanitize music links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s parse "https://soundcloud.com/artist/track?si=abc"
    %(prog)s parse "soundcloud.com/artist/sets/playlist" --json
    %(prog)s sanitize "https://soundcloud.com/artist/track?in=artist/sets/mix"
    %(prog)s providers
    %(prog)s validate-config
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    parse_parser = subparsers.add_parser("parse", help="Classify a music URL")
    parse_parser.add_argument("url", help="Track or playlist URL")
    parse_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    sanitize_parser = subparsers.add_parser(
        "sanitize", help="Strip tracking parameters from a music URL"
    )
    sanitize_parser.add_argument("url", help="Track or playlist URL")

    subparsers.add_parser("providers", help="List registered providers")

    subparsers.add_parser(
        "validate-config",
        help="Validate parser configuration",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return

    if args.command == "validate-config":
        _cmd_validate_config(args)
        return

    try:
        registry = create_registry()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "parse":
        _cmd_parse(args, registry)
    elif args.command == "sanitize":
        _cmd_sanitize(args, registry)
    elif args.command == "providers":
        _cmd_providers(args, registry)


if __name__ == "__main__":
    main()
