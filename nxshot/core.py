import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from tqdm import tqdm

from . import config
from .catalog import Catalog
from .exceptions import (
    CaptureFormatError,
    OutputRootError,
    ScanAccessError,
    SelectionAborted,
    SourceReadError,
    WriteError,
)
from .metadata.extract import extract_record
from .models import CopyResult, CopyStatus
from .organization.organizer import Organizer
from .progress import Observer, OrganizeJob
from .scanning.classifier import order_candidates
from .scanning.walker import TreeWalker

RootSelector = Callable[[], Path]


class Outcome(str, Enum):
    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class LoadResult:
    outcome: Outcome
    job: OrganizeJob
    error: Optional[str] = None


@dataclass
class OrganizeSummary:
    outcome: Outcome
    job: OrganizeJob
    results: List[CopyResult] = field(default_factory=list)
    scan_errors: List[ScanAccessError] = field(default_factory=list)
    error: Optional[str] = None

    def count(self, status: CopyStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def failures(self) -> List[CopyResult]:
        return [r for r in self.results if r.status is CopyStatus.FAILED]


class NxshotApp:
    def __init__(self,
                 catalog: Catalog,
                 output_dir_name: str = config.OUTPUT_DIR_NAME,
                 overwrite: bool = True,
                 strict_scan: bool = False,
                 dry_run: bool = False,
                 show_progress: bool = True,
                 observer: Optional[Observer] = None):
        self.catalog = catalog
        self.output_dir_name = output_dir_name
        self.overwrite = overwrite
        self.strict_scan = strict_scan
        self.dry_run = dry_run
        self.show_progress = show_progress
        self.observer = observer

    def _new_job(self, root: Optional[Path] = None) -> OrganizeJob:
        job = OrganizeJob(root)
        if self.observer:
            job.subscribe(self.observer)
        return job

    def load(self, select_root: RootSelector) -> LoadResult:
        """
        Asks the selector for a root and scans it.
        An aborted selection is not an error: the job stays IDLE.
        """
        try:
            root = select_root()
        except SelectionAborted:
            logging.info("Folder selection cancelled.")
            return LoadResult(Outcome.CANCELLED, self._new_job())

        job = self._new_job(root)
        try:
            self.scan(root, job)
        except ScanAccessError as e:
            logging.error(f"Scan failed: {e}")
            return LoadResult(Outcome.FAILED, job, error=str(e))
        return LoadResult(Outcome.SUCCEEDED, job)

    def scan(self, root: Path, job: Optional[OrganizeJob] = None) -> OrganizeJob:
        """
        Walks root and finalizes the candidate list (images, then videos).

        Raises:
            ScanAccessError: if strict scanning is on and a directory is unreadable.
        """
        job = job or self._new_job(root)
        job.begin_scan()
        logging.info(f"Scanning {root}...")

        walker = TreeWalker(exclude_name=self.output_dir_name, strict=self.strict_scan)
        try:
            candidates = order_candidates(walker.iter_files(root))
        except ScanAccessError:
            job.fail()
            raise
        job.set_candidates(candidates, walker.errors)
        logging.info(f"Scan complete. {job.status_message()}"
                     + (f" ({len(job.scan_errors)} unreadable paths)" if job.scan_errors else ""))
        return job

    def organize(self, job: OrganizeJob) -> OrganizeSummary:
        """
        Copies each candidate into its application folder, one at a time.

        Per-file failures are recorded and the batch continues. Only a failure
        to create the output root stops the job.
        """
        if job.root is None:
            raise ValueError("Job has no root directory")

        organizer = Organizer(job.root / self.output_dir_name,
                              overwrite=self.overwrite,
                              dry_run=self.dry_run)
        summary = OrganizeSummary(Outcome.SUCCEEDED, job, scan_errors=list(job.scan_errors))

        job.begin_organizing()
        try:
            organizer.ensure_output_root()
        except OutputRootError as e:
            logging.error(str(e))
            job.fail()
            summary.outcome = Outcome.FAILED
            summary.error = str(e)
            return summary

        logging.info(f"Processing {job.total} files (Overwrite={self.overwrite}, DryRun={self.dry_run})...")

        for entry in tqdm(job.candidates, desc="Organizing", disable=not self.show_progress):
            record = None
            try:
                record = extract_record(entry, self.catalog)
                result = organizer.organize(record)
            except (CaptureFormatError, SourceReadError, WriteError) as e:
                logging.error(f"Failed to process {entry.path}: {e}")
                result = CopyResult(source=entry.path,
                                    destination=organizer.destination_for(record) if record else None,
                                    status=CopyStatus.FAILED, record=record, error=str(e))
            summary.results.append(result)
            job.advance()

        if not job.is_done:
            job.finish()
        if summary.failures:
            summary.outcome = Outcome.FAILED
        logging.info(f"Organization complete: {job.status_message()}")
        return summary

    def run(self, select_root: RootSelector) -> OrganizeSummary:
        """Select, scan, and organize in one go."""
        loaded = self.load(select_root)
        if loaded.outcome is not Outcome.SUCCEEDED:
            return OrganizeSummary(loaded.outcome, loaded.job,
                                   scan_errors=list(loaded.job.scan_errors),
                                   error=loaded.error)
        return self.organize(loaded.job)
