from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console

from smarttext.config.manager import ConfigManager
from smarttext.parsing import AnnotatedSegment, ConfigurationError, Segment
from smarttext.render import affordances, to_rich_text
from smarttext.utils.logger import setup_logging

log = logging.getLogger(__name__)


def segment_to_dict(segment: Segment) -> dict:
    if not isinstance(segment, AnnotatedSegment):
        return {"text": segment.text, "matched": False}
    data: dict = {
        "text": segment.text,
        "matched": True,
        "type": segment.descriptor.type.value,
        "pattern": segment.pattern,
        "value": segment.tap_value,
        "style": str(segment.style) if segment.style is not None else None,
        "affordances": [a.value for a in affordances(segment)],
    }
    profile = segment.profile
    if profile is not None:
        data["profile"] = {"platform": profile[0].value, "username": profile[1]}
    return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="smarttext",
        description="Highlight emails, phone numbers, URLs and custom patterns",
    )
    parser.add_argument("file", nargs="?", help="Text file to parse (default: stdin)")
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("--ignore-case", action="store_true", help="Match case-insensitively")
    parser.add_argument("--json", action="store_true", help="Print segments as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    config = ConfigManager(config_path=args.config)
    try:
        config.load()
        setup_logging(
            log_file=str(config.get("general.log_file", "")),
            log_level=str(config.get("general.log_level", "INFO")),
            verbose=args.verbose,
        )
        text_parser = config.build_parser(ignore_case=args.ignore_case)
    except ConfigurationError as exc:
        log.debug("Configuration rejected", exc_info=True)
        print(f"smarttext: configuration error: {exc}", file=sys.stderr)
        return 2

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    segments = text_parser.parse(text)
    log.debug("Parsed %d character(s) into %d segment(s)", len(text), len(segments))
    if args.json:
        json.dump([segment_to_dict(s) for s in segments], sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        Console().print(to_rich_text(segments), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
