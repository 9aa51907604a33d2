"""dirdiff - Structural and content comparison of two directory trees."""

__version__ = "0.1.0"

# Environment variable overrides
ENV_HASH_ALGORITHM = "DIRDIFF_HASH_ALGORITHM"
ENV_WORKERS = "DIRDIFF_WORKERS"

from .compare import compare  # noqa: E402
from .models import DiffResult  # noqa: E402

__all__ = ["DiffResult", "__version__", "compare"]
