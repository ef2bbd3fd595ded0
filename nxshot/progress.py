"""
Progress tracking for an organize pass.

An OrganizeJob holds the ordered candidate list and a cursor counting how many
of them have been processed. State only moves forward:

    IDLE -> SCANNING -> READY -> ORGANIZING -> DONE
               |                     |
               +------> FAILED <-----+

Observers registered with `subscribe` are called with the job after every
state change and every cursor advance.
"""
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .exceptions import InvalidTransitionError, ScanAccessError
from .models import FileEntry


class JobState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    READY = "ready"
    ORGANIZING = "organizing"
    DONE = "done"
    FAILED = "failed"


_ALLOWED = {
    JobState.IDLE: {JobState.SCANNING},
    JobState.SCANNING: {JobState.READY, JobState.FAILED},
    JobState.READY: {JobState.ORGANIZING},
    JobState.ORGANIZING: {JobState.DONE, JobState.FAILED},
    JobState.DONE: set(),
    JobState.FAILED: set(),
}

Observer = Callable[["OrganizeJob"], None]


class OrganizeJob:
    def __init__(self, root: Optional[Path] = None):
        self.root = root
        self.state = JobState.IDLE
        self._candidates: List[FileEntry] = []
        self._cursor = 0
        self._observers: List[Observer] = []
        self.scan_errors: List[ScanAccessError] = []

    def __repr__(self) -> str:
        return f"OrganizeJob(state={self.state.value}, cursor={self._cursor}/{len(self._candidates)})"

    @property
    def candidates(self) -> Sequence[FileEntry]:
        return tuple(self._candidates)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total(self) -> int:
        return len(self._candidates)

    @property
    def is_done(self) -> bool:
        return self.state is JobState.DONE

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def _notify(self) -> None:
        for observer in self._observers:
            observer(self)

    def _transition(self, new_state: JobState) -> None:
        if new_state not in _ALLOWED[self.state]:
            raise InvalidTransitionError(f"Cannot move job from {self.state.value} to {new_state.value}")
        logging.debug(f"Job state: {self.state.value} -> {new_state.value}")
        self.state = new_state
        self._notify()

    # --- Transitions ---

    def begin_scan(self) -> None:
        self._transition(JobState.SCANNING)

    def set_candidates(self,
                       candidates: Sequence[FileEntry],
                       scan_errors: Sequence[ScanAccessError] = ()) -> None:
        """Finalizes the candidate list, along with any paths the scan could not read. Cursor starts at 0."""
        if self.state is not JobState.SCANNING:
            raise InvalidTransitionError(f"Candidates can only be set while scanning (state={self.state.value})")
        self._candidates = list(candidates)
        self.scan_errors = list(scan_errors)
        self._cursor = 0
        self._transition(JobState.READY)

    def begin_organizing(self) -> None:
        self._transition(JobState.ORGANIZING)

    def finish(self) -> None:
        """Closes an organizing job whose cursor already reached the end (e.g. an empty batch)."""
        if self._cursor != len(self._candidates):
            raise InvalidTransitionError(f"Cannot finish with {len(self._candidates) - self._cursor} files left")
        self._transition(JobState.DONE)

    def advance(self) -> None:
        """Marks one more candidate as processed. Finishes the job at the end."""
        if self.state is not JobState.ORGANIZING:
            raise InvalidTransitionError(f"Cannot advance a job that is {self.state.value}")
        if self._cursor >= len(self._candidates):
            raise InvalidTransitionError("Cursor is already at the end of the candidate list")
        self._cursor += 1
        self._notify()
        if self._cursor == len(self._candidates):
            self._transition(JobState.DONE)

    def fail(self) -> None:
        self._transition(JobState.FAILED)

    # --- Reporting ---

    def status_message(self) -> str:
        if self.state is JobState.IDLE:
            return "No folder selected"
        if self.state is JobState.SCANNING:
            return "Scanning..."
        if self.state is JobState.FAILED:
            return f"Failed after {self._cursor} of {len(self._candidates)} files"
        if self._cursor == 0 and self.state is not JobState.DONE:
            return f"{len(self._candidates)} files found"
        if self._cursor < len(self._candidates):
            return f"File {self._cursor} of {len(self._candidates)}"
        return "All files processed"
