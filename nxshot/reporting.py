import csv
import logging
from pathlib import Path
from typing import List

from .core import OrganizeSummary, Outcome
from .models import CopyResult, CopyStatus

HEADERS = [
    "Source Path",
    "Status",
    "Display Name",
    "Identifier",
    "Captured At",
    "Destination Path",
    "Notes",
]


class ReportGenerator:
    def __init__(self, summary: OrganizeSummary):
        self.summary = summary

    def log_summary(self):
        """Writes the end-of-run totals (and every failure) to the log."""
        s = self.summary
        if s.outcome is Outcome.CANCELLED:
            logging.info("Nothing organized: folder selection was cancelled.")
            return

        logging.info("--- Summary ---")
        logging.info(f"Candidates:  {s.job.total}")
        logging.info(f"Copied:      {s.count(CopyStatus.COPIED)}")
        if s.count(CopyStatus.DRY_RUN):
            logging.info(f"Dry run:     {s.count(CopyStatus.DRY_RUN)}")
        logging.info(f"Skipped:     {s.count(CopyStatus.SKIPPED)}")
        logging.info(f"Failed:      {len(s.failures)}")
        logging.info(f"Scan errors: {len(s.scan_errors)}")

        for failure in s.failures:
            logging.error(f"FAILED {failure.source}: {failure.error}")
        for err in s.scan_errors:
            logging.warning(f"UNREADABLE {err.path}: {err.cause}")
        if s.error:
            logging.error(f"Run aborted: {s.error}")

    def generate_csv(self, output_csv: Path) -> int:
        """
        Writes one row per processed candidate plus one per unreadable path.
        Returns the number of rows written (excluding the header).
        """
        rows = [self._row(r) for r in self.summary.results]
        rows += [
            [str(err.path), "Unreadable", "", "", "", "", str(err.cause)]
            for err in self.summary.scan_errors
        ]

        # Non-UTF-8 path bytes arrive as surrogates; write them as escapes
        with open(output_csv, "w", newline="", encoding="utf-8", errors="backslashreplace") as f:
            writer = csv.writer(f)
            writer.writerow(HEADERS)
            writer.writerows(rows)

        logging.info(f"Report written: {output_csv} ({len(rows)} rows)")
        return len(rows)

    def _row(self, result: CopyResult) -> List[str]:
        record = result.record
        status = {
            CopyStatus.COPIED: "Copied",
            CopyStatus.SKIPPED: "Skipped (Exists)",
            CopyStatus.DRY_RUN: "Dry Run",
            CopyStatus.FAILED: "Failed",
        }[result.status]

        captured = ""
        if record is not None and record.captured_at is not None:
            captured = record.captured_at.isoformat(sep=" ")

        return [
            str(result.source),
            status,
            record.display_name if record else "",
            record.identifier if record else "",
            captured,
            str(result.destination) if result.destination else "",
            result.error or "",
        ]
