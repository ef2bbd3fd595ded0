import os
import logging
from pathlib import Path
from typing import Iterator, List

from .. import config
from ..exceptions import ScanAccessError
from ..models import EntryKind, FileEntry


class TreeWalker:
    """
    Yields every regular file under a root, skipping any directory named like
    the output root so already-organized copies are not scanned again.

    Directories that cannot be listed are recorded in `errors` and skipped, or
    raised immediately when `strict` is set.
    """

    def __init__(self, exclude_name: str = config.OUTPUT_DIR_NAME, strict: bool = False):
        self.exclude_name = exclude_name
        self.strict = strict
        self.errors: List[ScanAccessError] = []

    def iter_files(self, root: Path) -> Iterator[FileEntry]:
        """Depth-first walker using os.scandir and an explicit stack."""
        self.errors = []
        stack = [root]
        while stack:
            current = stack.pop()
            if current.name == self.exclude_name:
                logging.debug(f"Skipping output directory: {current}")
                continue

            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                err = ScanAccessError(current, e)
                if self.strict:
                    raise err from e
                logging.warning(f"Cannot read directory, skipping: {current} ({e})")
                self.errors.append(err)
                continue

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name.lower())

            dirs = []
            files = []
            for e in entries:
                try:
                    if e.is_dir(follow_symlinks=False):
                        dirs.append(Path(e.path))
                    elif e.is_file(follow_symlinks=False):
                        files.append(Path(e.path))
                except OSError as stat_err:
                    err = ScanAccessError(Path(e.path), stat_err)
                    if self.strict:
                        raise err from stat_err
                    logging.warning(f"Cannot stat entry, skipping: {e.path} ({stat_err})")
                    self.errors.append(err)

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                yield FileEntry(path=f, kind=EntryKind.FILE)
