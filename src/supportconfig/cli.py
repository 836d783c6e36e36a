"""Command-line surface for splitting supportconfig reports."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable

from supportconfig.config import DEFAULT_CONFIG_PATH, load_splitter_config
from supportconfig.errors import SupportconfigError
from supportconfig.inventory import scan_sections
from supportconfig.splitter import FileSplitter, open_report

logger = logging.getLogger("supportconfig")


def build_parser() -> argparse.ArgumentParser:
    """Create a reusable argument parser for scripts and tests."""
    parser = argparse.ArgumentParser(
        prog="supportconfig-split",
        description="Extract configuration and log files from a supportconfig report.",
    )
    parser.add_argument(
        "report",
        type=Path,
        help="Report text file, e.g. basic-environment.txt or messages.txt.",
    )
    parser.add_argument(
        "--output-dir",
        default=Path("supportconfig"),
        type=Path,
        help="Directory the extracted files are written below.",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        type=Path,
        help="YAML settings file; the default one is ignored when missing.",
    )
    parser.add_argument(
        "--flatten",
        action="store_true",
        default=None,
        help="Write all files directly below the output directory.",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        default=None,
        help="Keep repeated sections for one path as path.1, path.2, ...",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip original paths matching this glob (repeatable).",
    )
    parser.add_argument(
        "--list-sections",
        action="store_true",
        help="Only list the sections found in the report.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format when using --list-sections.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every section as it is handled.",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _list_sections(report: Path, output_format: str) -> None:
    with open_report(report) as source:
        entries = scan_sections(source)
    if output_format == "json":
        print(json.dumps([entry.to_dict() for entry in entries], indent=2))
        return
    if not entries:
        print(f"No sections found in {report}")
        return
    for entry in entries:
        target = entry.path or entry.header
        print(f"[{entry.kind}] {target} ({entry.lines} lines)")


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point invoked by `python -m supportconfig.cli` or the console script."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.verbose)

    try:
        if args.list_sections:
            _list_sections(args.report, args.format)
            return 0

        config = load_splitter_config(
            args.config, strict=args.config != DEFAULT_CONFIG_PATH
        ).with_overrides(
            flatten=args.flatten,
            unique=args.unique,
            exclude=args.exclude,
        )
        splitter = FileSplitter(
            base=args.output_dir,
            path_mapper=config.build_mapper(),
            kinds=config.kinds,
        )
        with open_report(args.report) as source:
            result = splitter.split(source)
    except (SupportconfigError, OSError, ValueError) as exc:
        logger.error("Failed to split %s: %s", args.report, exc)
        return 1

    logger.info(
        "Wrote %d files to %s (%d sections, %d skipped)",
        len(result.written),
        args.output_dir,
        result.stats.sections,
        len(result.skipped),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
