"""Three-way reconciliation of two scanned trees."""

from .models import DiffResult, TreeMapping


def reconcile(tree_a: TreeMapping, tree_b: TreeMapping) -> DiffResult:
    """
    Classify every relative path across two tree mappings.

    Fingerprints are compared by their comparison value: the digest for a
    readable file, the failure reason for an unreadable one. Two unreadable
    files with the same reason therefore count as equal, and an unreadable
    file never equals a readable one.

    Args:
        tree_a: Mapping from the first root
        tree_b: Mapping from the second root

    Returns:
        DiffResult with only_in_a, only_in_b and differs populated
    """
    only_in_a: list[str] = []
    only_in_b: list[str] = []
    differs: list[str] = []
    unreadable: list[str] = []

    for path, record_a in tree_a.items():
        record_b = tree_b.get(path)
        if record_b is None:
            only_in_a.append(path)
            continue

        fp_a, fp_b = record_a.fingerprint, record_b.fingerprint
        if fp_a.comparison_value != fp_b.comparison_value:
            differs.append(path)
        if not (fp_a.is_valid and fp_b.is_valid):
            unreadable.append(path)

    for path in tree_b:
        if path not in tree_a:
            only_in_b.append(path)

    return DiffResult(
        only_in_a=tuple(sorted(only_in_a)),
        only_in_b=tuple(sorted(only_in_b)),
        differs=tuple(sorted(differs)),
        unreadable=tuple(sorted(unreadable)),
    )
