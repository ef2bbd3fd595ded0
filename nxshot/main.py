import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .catalog import Catalog, load_catalog
from .core import NxshotApp, Outcome, RootSelector
from .exceptions import CatalogError, SelectionAborted
from .reporting import ReportGenerator


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file, encoding='utf-8', errors='backslashreplace'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="nxshot: organize Switch captures into per-game folders")

    p.add_argument("root", type=Path, nargs="?", default=None,
                   help="Album directory to organize (prompted for if omitted)")
    p.add_argument("--catalog", type=Path, default=None,
                   help="JSON file mapping 32-character game IDs to game names")

    p.add_argument("--no-overwrite", action="store_true", help="Leave existing organized files untouched")
    p.add_argument("--strict-scan", action="store_true", help="Stop on the first unreadable directory")
    p.add_argument("--dry-run", action="store_true", help="Simulate actions without modifying disk")
    p.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    p.add_argument("--report-csv", type=Path, default=None, help="Write a per-file CSV report to this path")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")

    return p.parse_args(argv)


def prompt_for_root() -> Path:
    """Interactive root selector. Empty input or Ctrl-C/Ctrl-D cancels."""
    try:
        answer = input("Album directory: ").strip()
    except (EOFError, KeyboardInterrupt):
        raise SelectionAborted("No directory selected")
    if not answer:
        raise SelectionAborted("No directory selected")
    return Path(answer).expanduser()


def make_selector(root: Optional[Path]) -> RootSelector:
    if root is None:
        return prompt_for_root

    def select() -> Path:
        return root

    return select


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    logging.info("=== nxshot Started ===")

    # 1. Catalog
    if args.catalog:
        try:
            catalog = load_catalog(args.catalog)
        except CatalogError as e:
            logging.error(str(e))
            return 2
    else:
        logging.warning("No catalog given; every capture will be filed under 'Unknown'.")
        catalog = Catalog()

    # 2. Root
    select = make_selector(args.root)

    def select_checked() -> Path:
        root = select().resolve()
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")
        logging.info(f"Source: {root}")
        return root

    # 3. Execution
    app = NxshotApp(
        catalog,
        overwrite=not args.no_overwrite,
        strict_scan=args.strict_scan,
        dry_run=args.dry_run,
        show_progress=not args.no_progress,
    )

    try:
        summary = app.run(select_checked)
    except NotADirectoryError as e:
        logging.error(str(e))
        return 1
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return 1
    except Exception:
        logging.exception("Fatal error during organization.")
        return 1

    reporter = ReportGenerator(summary)
    try:
        reporter.log_summary()
        if args.report_csv and summary.outcome is not Outcome.CANCELLED:
            reporter.generate_csv(args.report_csv)
    except Exception:
        logging.exception("Failed to write the report.")
        return 1

    return 1 if summary.outcome is Outcome.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
