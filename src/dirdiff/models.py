"""Value types shared by the scanner and the reconciler."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias


@dataclass(frozen=True)
class ValidFingerprint:
    """Content hash of a file that was read in full."""

    digest: str  # hex digest of the file bytes

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def comparison_value(self) -> str:
        return self.digest


@dataclass(frozen=True)
class InvalidFingerprint:
    """A file that could not be opened or fully read."""

    reason: str  # human-readable OS error message

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def comparison_value(self) -> str:
        return self.reason


Fingerprint: TypeAlias = ValidFingerprint | InvalidFingerprint


@dataclass(frozen=True)
class FileRecord:
    """A scanned file: its path relative to the scan root and its fingerprint."""

    path: str
    fingerprint: Fingerprint


# Relative POSIX path -> record. Read-only once a scan completes.
TreeMapping: TypeAlias = Mapping[str, FileRecord]


@dataclass(frozen=True)
class DiffResult:
    """Three-way classification of relative paths across two roots.

    Collections are sorted for stable output; their order carries no meaning.
    ``unreadable`` lists shared paths where either side failed to read and is
    informational only.
    """

    only_in_a: tuple[str, ...] = ()
    only_in_b: tuple[str, ...] = ()
    differs: tuple[str, ...] = ()
    unreadable: tuple[str, ...] = field(default=(), compare=False)

    @property
    def has_changes(self) -> bool:
        """Check if the two trees differ at all."""
        return bool(self.only_in_a or self.only_in_b or self.differs)

    @property
    def total_changes(self) -> int:
        """Total number of paths that differ between the trees."""
        return len(self.only_in_a) + len(self.only_in_b) + len(self.differs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "only_in_a": list(self.only_in_a),
            "only_in_b": list(self.only_in_b),
            "differs": list(self.differs),
            "unreadable": list(self.unreadable),
        }
