"""Command-line interface to run the fnkit worked examples."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fnkit import config as app_config
from fnkit.examples import run_examples
from fnkit.utils.logging import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=PROJECT_ROOT / "configs" / "defaults.yaml")
    parser.add_argument("--only", nargs="+", default=None, help="run only the named examples")
    parser.add_argument(
        "--log-level",
        default=None,
        help="override the configured log level; the results table is printed regardless",
    )
    return parser.parse_args(argv)


def print_summary(results: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Print one row per example with the repr of its result."""

    table = Table(title="fnkit examples")
    table.add_column("example")
    table.add_column("result")
    for name, value in results.items():
        table.add_row(Text(name), Text(repr(value)))
    (console or Console()).print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = app_config.load_app_config(args.config) if args.config.exists() else app_config.AppConfig()
    level = args.log_level or cfg.logging.level
    setup_logging(level=level, rich_tracebacks=cfg.logging.rich_tracebacks)

    names = cfg.examples.names if args.only is None else app_config.validate_example_names(args.only)
    print_summary(run_examples(names))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
