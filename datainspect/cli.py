# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides command-line interface to inspect a file.
#   This is how users interact with the system.
#
# USAGE:
# ------
#   datainspect data.csv
#   datainspect --types data.csv
#   datainspect --summary --diagnostics data.csv
#   datainspect --types records.json
#   python -m datainspect --delimiter ";" data.csv
#
# EXIT STATUS:
# ------------
#   0 → report printed
#   1 → file missing / unreadable / malformed / unsupported
#   2 → bad command line (argparse)
#
# ==============================================

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from datainspect import __version__
from datainspect.config import get_config
from datainspect.errors import DataInspectError
from datainspect.inspector import DataInspector
from datainspect.reporter import Reporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datainspect",
        description="Infer column types, statistics and data-quality warnings for CSV/JSON files.",
    )
    parser.add_argument("file", help="Path to a .csv or .json file")
    parser.add_argument("--types", action="store_true", help="Show inferred column types")
    parser.add_argument("--summary", action="store_true", help="Show per-column statistics")
    parser.add_argument("--diagnostics", action="store_true", help="Show data-quality warnings")
    parser.add_argument("--delimiter", help="CSV field delimiter (default from config: ',')")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.delimiter:
        config = replace(config, reader=replace(config.reader, delimiter=args.delimiter))

    try:
        result = DataInspector(config).inspect(args.file)
    except DataInspectError as e:
        logger.debug("Inspection of %s failed", args.file, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(Reporter().render(
        result,
        show_types=args.types,
        show_summary=args.summary,
        show_diagnostics=args.diagnostics,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
