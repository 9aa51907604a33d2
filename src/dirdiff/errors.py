"""Exceptions raised by dirdiff."""


class DirDiffError(Exception):
    """Base exception for dirdiff errors."""

    pass


class ComparisonError(DirDiffError):
    """A scan of one root terminated abnormally; no diff can be produced."""

    def __init__(self, root: str, message: str):
        self.root = root
        super().__init__(f"Scan of {root} failed: {message}")


class ConfigError(DirDiffError):
    """Configuration file could not be read or failed validation."""

    pass
