"""CLI entrypoint for cssdebloat."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cssdebloat import __version__
from cssdebloat.config import load_config, validate_config_file
from cssdebloat.constants.branding import CLI_DESCRIPTION, CLI_PROG
from cssdebloat.exceptions import ConfigError
from cssdebloat.exceptions.validation import format_errors
from cssdebloat.io import load_used_markup, read_stylesheet, write_text_atomic
from cssdebloat.sanitizer import sanitize_stylesheets


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=CLI_PROG,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("sanitize", help="Remove unused rules from a stylesheet")
    run.add_argument("css_file", type=Path, help="Stylesheet to optimize")
    run.add_argument(
        "-m",
        "--markup",
        type=Path,
        required=True,
        help="YAML or JSON file listing used classes, tags and ids",
    )
    run.add_argument(
        "-u",
        "--url",
        default=None,
        help="Public URL of the stylesheet, used to rewrite relative asset URLs",
    )
    run.add_argument(
        "-s",
        "--site-url",
        default=None,
        help="Site URL used to resolve a --url without a host",
    )
    run.add_argument("-i", "--id", dest="sheet_id", default=None, help="Stylesheet handle (default: file stem)")
    run.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding debloat.yaml")
    run.add_argument("-c", "--config", type=Path, help="Explicit config file")
    run.add_argument("-o", "--output", type=Path, default=None, help="Write CSS here instead of stdout")
    run.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without sanitizing")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding debloat.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "sanitize":
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = load_config(args.root, args.config)
        used_markup = load_used_markup(args.markup)
        sheet = read_stylesheet(
            args.css_file,
            url=args.url,
            sheet_id=args.sheet_id,
            site_url=args.site_url,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2

    results = sanitize_stylesheets([sheet], used_markup, config)
    css = results[sheet.id]

    if args.output is not None:
        write_text_atomic(args.output, css)
    else:
        sys.stdout.write(css)
        if css:
            sys.stdout.write("\n")
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
