import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional

# --- Settings/Logging ---
from presidents.logging.setup import setup_logging
from presidents.config.settings import LOG_LEVELS, settings

from loguru import logger

from presidents.models.enums import RowPolicy
from presidents.extraction.context import TableContext
from presidents.extraction.dataset import DataSet
from presidents.extraction.errors import ExtractionError, MalformedRowError

from rich import print
from rich.panel import Panel
from rich.text import Text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Print the most recent U.S. presidents from a saved copy of "
            f"{DataSet.source}"
        )
    )
    parser.add_argument(
        "amount",
        nargs="?",
        type=int,
        default=settings.default_amount,
        help=f"Number of rows to show, newest first (default: {settings.default_amount})",
    )
    parser.add_argument(
        "--html",
        type=Path,
        help="Path to the saved page HTML (reads stdin when omitted)",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in RowPolicy],
        default=settings.row_policy.value,
        help="Handling of rows missing the id or name link",
    )
    parser.add_argument("--json", action="store_true", help="Emit records as JSON")
    parser.add_argument(
        "--panel", action="store_true", help="Wrap the output in a titled panel"
    )
    parser.add_argument("--output", type=Path, help="Write the result to this file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL for this run",
    )
    return parser


def load_context(html_path: Optional[Path]) -> TableContext:
    if html_path is not None:
        return TableContext.from_file(html_path)
    logger.debug("Reading page HTML from stdin")
    return TableContext.from_html(sys.stdin.read())


def run(args: argparse.Namespace) -> str:
    """Extracts the requested rows and returns the rendered result."""
    dataset = DataSet(load_context(args.html), RowPolicy(args.policy))
    if args.json:
        return json.dumps(dataset.as_dicts(args.amount), indent=4, ensure_ascii=False)
    return dataset.render(args.amount)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    logger.info(f"Extracting {args.amount} rows (source: {DataSet.source})")

    try:
        result = run(args)
    except MalformedRowError as e:
        logger.error(f"Strict row policy rejected the table: {e}")
        return 1
    except ExtractionError as e:
        logger.error(f"Extraction failed: {e}")
        return 1

    if args.output is not None:
        try:
            args.output.write_text(result + "\n", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write result to {args.output}: {e}")
            return 1
        logger.success(f"Saved result to {args.output}")
        return 0

    if args.panel:
        print(Panel(Text(result), title=f"from: {DataSet.source}"))
    else:
        print(Text(result))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
