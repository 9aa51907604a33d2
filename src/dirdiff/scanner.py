"""Tree scanning and per-file content fingerprinting."""

from __future__ import annotations

import concurrent.futures
import fnmatch
import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from .config import DirDiffConfig
from .models import FileRecord, Fingerprint, InvalidFingerprint, TreeMapping, ValidFingerprint

logger = logging.getLogger(__name__)


@dataclass
class ScanStats:
    """Statistics from scanning one root."""

    files_hashed: int = 0  # Files read in full and hashed
    files_unreadable: int = 0  # Files recorded as InvalidFingerprint
    directories_processed: int = 0

    @property
    def total_files(self) -> int:
        return self.files_hashed + self.files_unreadable


def compute_fingerprint(filepath: Path, algorithm: str = "md5") -> Fingerprint:
    """Hash the full contents of a file.

    Open and read failures are returned as an InvalidFingerprint carrying
    the OS error message (without the path) instead of being raised.
    """
    try:
        contents = _read_contents(filepath)
    except OSError as e:
        return InvalidFingerprint(reason=e.strerror or str(e))
    digest = hashlib.new(algorithm, contents, usedforsecurity=False).hexdigest()
    return ValidFingerprint(digest=digest)


def should_exclude(path: Path, exclude_patterns: list[str]) -> bool:
    """Check if path matches any exclusion pattern."""
    name = path.name
    for pattern in exclude_patterns:
        if fnmatch.fnmatch(name, pattern):
            return True
    return False


class TreeScanner:
    """Converts a root directory into a TreeMapping."""

    def __init__(self, config: DirDiffConfig | None = None):
        self.config = config or DirDiffConfig()
        self.stats = ScanStats()

    def scan(self, root: Path) -> TreeMapping:
        """
        Enumerate every regular file under root and fingerprint it.

        Args:
            root: Directory to scan. A missing root or a non-directory
                yields an empty mapping.

        Returns:
            Read-only mapping of relative POSIX path -> FileRecord
        """
        self.stats = ScanStats()
        root = Path(root)

        if not root.is_dir():
            logger.debug("Root %s is not a directory, treating as empty", root)
            return MappingProxyType({})

        files = self._collect_files(root)

        records: dict[str, FileRecord] = {}
        if files:
            with concurrent.futures.ThreadPoolExecutor(
                max_workers=self.config.worker_count()
            ) as ex:
                for record in ex.map(lambda p: self._fingerprint(p, root), files):
                    records[record.path] = record
                    if record.fingerprint.is_valid:
                        self.stats.files_hashed += 1
                    else:
                        self.stats.files_unreadable += 1

        logger.info(
            "Scanned %s: %d files (%d unreadable) in %d directories",
            root,
            self.stats.total_files,
            self.stats.files_unreadable,
            self.stats.directories_processed,
        )
        return MappingProxyType(records)

    def _collect_files(self, root: Path) -> list[Path]:
        """Gather regular files under root, skipping symlinks and special entries.

        Walks with an explicit stack so tree depth is not bounded by the
        recursion limit. Directories that cannot be listed are skipped.
        """
        files: list[Path] = []
        pending = [root]
        while pending:
            directory = pending.pop()
            self.stats.directories_processed += 1
            try:
                entries = sorted(directory.iterdir())
            except OSError as e:
                logger.debug("Cannot list %s: %s", directory, e)
                continue

            for entry in entries:
                if should_exclude(entry, self.config.exclude_patterns):
                    continue
                if entry.is_symlink():
                    continue
                if entry.is_dir():
                    pending.append(entry)
                elif entry.is_file():
                    files.append(entry)
        return files

    def _fingerprint(self, filepath: Path, root: Path) -> FileRecord:
        fingerprint = compute_fingerprint(filepath, self.config.hash_algorithm)
        if not fingerprint.is_valid:
            logger.warning("Cannot read %s: %s", filepath, fingerprint.comparison_value)
        return FileRecord(
            path=filepath.relative_to(root).as_posix(),
            fingerprint=fingerprint,
        )


def scan_tree(root: Path, config: DirDiffConfig | None = None) -> TreeMapping:
    """Convenience wrapper around TreeScanner.scan()."""
    return TreeScanner(config).scan(root)


def _read_contents(filepath: Path) -> bytes:
    """Read a file's full contents into memory."""
    with open(filepath, "rb") as f:
        return f.read()
