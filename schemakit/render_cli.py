"""Command-line entrypoint for rendering and inspecting JSON-LD."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, TextIO

from schemakit.core.config import configure_logging, get_settings
from schemakit.errors import ConfigError, PageFetchError, RecordError
from schemakit.kinds import SCHEMA_KINDS, render_payload
from schemakit.vendors.page_schemas import fetch_page_schemas, schema_types

logger = logging.getLogger(__name__)


def _read_payload(path: Optional[str], stdin: TextIO) -> Any:
    if not path or path == "-":
        return json.load(stdin)
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def run_render(
    kind: str, path: Optional[str], *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> None:
    stdout = stdout or sys.stdout
    settings = get_settings()
    payload = _read_payload(path, stdin or sys.stdin)
    script = render_payload(kind, payload, default_country=settings.default_country)
    stdout.write(script + "\n")


def run_inspect(url: str, *, stdout: Optional[TextIO] = None) -> None:
    stdout = stdout or sys.stdout
    blocks = fetch_page_schemas(url)
    if not blocks:
        logger.warning("No JSON-LD blocks found at %s", url)
        return
    for block in blocks:
        types = schema_types([block]) or ["(untyped)"]
        stdout.write(f"# {', '.join(types)}\n")
        stdout.write(json.dumps(block, ensure_ascii=False, indent=4) + "\n")


def _parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="schemakit", description="Schema.org JSON-LD tooling.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a JSON payload as a JSON-LD script tag")
    render.add_argument("kind", choices=sorted(SCHEMA_KINDS), help="Schema kind to render")
    render.add_argument("file", nargs="?", default="-", help="JSON payload file, '-' for stdin")

    inspect = subparsers.add_parser("inspect", help="List the JSON-LD blocks on a live page")
    inspect.add_argument("url", help="Page URL, e.g. 'https://example.com/'")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_cli_args(argv)
    try:
        configure_logging(get_settings())
        if args.command == "render":
            run_render(args.kind, args.file)
        else:
            run_inspect(args.url)
    except (ConfigError, RecordError) as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except json.JSONDecodeError as exc:
        logger.error("Payload is not valid JSON: %s", exc)
        return 2
    except PageFetchError as exc:
        logger.error("Inspection failed: %s", exc)
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.error("schemakit failed: %s", exc, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
