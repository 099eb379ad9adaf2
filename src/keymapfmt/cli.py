"""Command-line interface for keymapfmt."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import uvicorn

from .config import settings


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="keymapfmt - Align keymap binding lists to an ASCII layout template"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Format command
    format_parser = subparsers.add_parser("format", help="Format keymap files")
    format_parser.add_argument(
        "files", nargs="+", help="Files to format ('-' reads standard input)"
    )
    format_parser.add_argument(
        "--in-place", "-i", action="store_true", help="Rewrite files in place"
    )
    format_parser.add_argument(
        "--check",
        action="store_true",
        help="Report files that would change and exit 1 if any would",
    )

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the formatting API server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "format":
        return run_format(args.files, in_place=args.in_place, check=args.check)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
        return 0
    else:
        parser.print_help()
        return 1


def run_format(files: list[str], in_place: bool = False, check: bool = False) -> int:
    """Format files, printing results unless writing in place."""
    from .host import FormattingProvider

    to_stdout = [name for name in files if name == "-" or not in_place]
    if not check and len(to_stdout) > 1:
        print(
            "Error: only one document can be written to stdout; "
            "use --in-place or --check for several files",
            file=sys.stderr,
        )
        return 2

    provider = FormattingProvider()
    would_change = []

    for name in files:
        if name == "-":
            original = sys.stdin.read()
            formatted = provider.format_text(original)
            if original != formatted:
                would_change.append(name)
            if not check:
                sys.stdout.write(formatted)
            continue

        try:
            result = provider.format_file(Path(name), write=in_place and not check)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot format {name}: {e}", file=sys.stderr)
            return 2

        if result.changed:
            would_change.append(name)
        if not check and not in_place:
            sys.stdout.write(result.formatted)

    if check:
        for name in would_change:
            print(f"would reformat {name}")
        return 1 if would_change else 0

    return 0


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "keymapfmt.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    sys.exit(main())
