"""Concurrent comparison of two directory trees."""

import concurrent.futures
import logging
from pathlib import Path

from .config import DirDiffConfig
from .errors import ComparisonError
from .models import DiffResult
from .reconciler import reconcile
from .scanner import TreeScanner

logger = logging.getLogger(__name__)


def compare(
    root_a: str | Path,
    root_b: str | Path,
    config: DirDiffConfig | None = None,
) -> DiffResult:
    """
    Compare two directory trees by relative path and file content.

    Each root is scanned on its own thread; both scans must finish before
    reconciliation starts. Roots that don't exist are treated as empty.

    Args:
        root_a: First root directory
        root_b: Second root directory
        config: Optional configuration (defaults if omitted)

    Returns:
        DiffResult for the two trees

    Raises:
        ComparisonError: If either scan terminates abnormally
    """
    config = config or DirDiffConfig()
    roots = (Path(root_a), Path(root_b))

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=2, thread_name_prefix="dirdiff-scan"
    ) as ex:
        futures = [ex.submit(TreeScanner(config).scan, root) for root in roots]

    trees = []
    for root, future in zip(roots, futures):
        try:
            trees.append(future.result())
        except Exception as e:
            raise ComparisonError(str(root), str(e) or type(e).__name__) from e

    result = reconcile(trees[0], trees[1])
    logger.info(
        "Compared %s and %s: %d only in A, %d only in B, %d differ",
        roots[0],
        roots[1],
        len(result.only_in_a),
        len(result.only_in_b),
        len(result.differs),
    )
    return result
