"""CLI entrypoint for cms-locale."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from cms_locale.config.loader import get_client_settings, get_locale_specs, load_config
from cms_locale.parsing.locales import LocaleSpec
from cms_locale.retrieval.errors import CmsLocaleError
from cms_locale.retrieval.projector import LocaleProjector
from cms_locale.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _parse_locale_args(values: Optional[List[str]]) -> List[LocaleSpec]:
    """Turn `--locale de-CH,de-DE` style arguments into LocaleSpecs."""
    specs = []
    for value in values or []:
        codes = [code.strip() for code in value.split(",") if code.strip()]
        if len(codes) == 1:
            specs.append(LocaleSpec.single(codes[0]))
        else:
            specs.append(LocaleSpec.fallback(codes))
    return specs


def _mask(token: str) -> str:
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


def cmd_fetch(args: argparse.Namespace) -> None:
    """Fetch entries of a content type and print projected records as JSON."""
    config = load_config(args.config)
    settings = get_client_settings(config)

    if args.raw:
        locales: List[LocaleSpec] = []
    elif args.locale:
        locales = _parse_locale_args(args.locale)
    else:
        locales = get_locale_specs(config)

    projector = LocaleProjector.from_config(settings, locales=locales)
    records = projector.fetch_projected(args.content_type)

    output = json.dumps(records, indent=2 if args.pretty else None, ensure_ascii=False, default=str)
    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        print(f"Wrote {len(records)} records to {args.output}")
    else:
        print(output)


def cmd_config_show(args: argparse.Namespace) -> None:
    """Print effective settings with the access token masked."""
    config = load_config(args.config)
    settings = get_client_settings(config)
    locales = get_locale_specs(config)

    print(f"{'Space':<14} {settings.space}")
    print(f"{'Environment':<14} {settings.environment}")
    print(f"{'Host':<14} {settings.host or '(default)'}")
    print(f"{'Access token':<14} {_mask(settings.access_token)}")
    if not locales:
        print(f"{'Locales':<14} (none, raw fields)")
        return
    print("Locales:")
    for spec in locales:
        print(f"  - {' > '.join(spec.codes)}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cms-locale",
        description="Fetch CMS entries and flatten them into per-locale records",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and project entries of a content type")
    fetch_parser.add_argument("content_type", type=str, help="Content type id")
    fetch_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: cms_locale.config.yaml)",
    )
    fetch_parser.add_argument(
        "--locale",
        action="append",
        help="Output locale; comma-separated codes form a fallback list. Repeatable.",
    )
    fetch_parser.add_argument(
        "--raw",
        action="store_true",
        help="Skip localization and keep locale-keyed field maps",
    )
    fetch_parser.add_argument(
        "--output",
        type=Path,
        help="Write JSON to this file instead of stdout",
    )
    fetch_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )
    fetch_parser.set_defaults(func=cmd_fetch)

    # config command
    config_parser = subparsers.add_parser("config", help="Configuration commands")
    config_subparsers = config_parser.add_subparsers(dest="config_subcommand", help="Config subcommands", required=True)
    config_show_parser = config_subparsers.add_parser("show", help="Show effective configuration")
    config_show_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: cms_locale.config.yaml)",
    )
    config_show_parser.set_defaults(func=cmd_config_show)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return

    try:
        args.func(args)
    except (CmsLocaleError, FileNotFoundError, ValueError) as e:
        logger.error(f"Error running command '{args.command}': {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
