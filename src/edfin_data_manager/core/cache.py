"""
Local cache for downloaded finance data artifacts.

One file per dataset variant lives in a per-user cache directory. A cached
file is considered current while it is younger than ``MAX_CACHE_AGE_DAYS``
(30 days by default); stale files are overwritten on the next query.

Usage
-----
>>> from edfin_data_manager.core.cache import CacheManager
>>> cache = CacheManager("/tmp/edfin-cache")
>>> cache.is_current("edfinr_data_fy12_fy22_skinny.rds")
False
"""

import logging
import time
from pathlib import Path

from .config import CACHE_DIR


logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class CacheManager:
    """Manager for the on-disk artifact cache.

    Parameters
    ----------
    root : Path | str | None, optional
        Cache directory. Defaults to the configured ``CACHE_DIR``. The
        directory is not created until :meth:`ensure_cache_dir` is called.
    """

    def __init__(self, root: Path | str | None = None):
        self.root = Path(root) if root is not None else CACHE_DIR
        self._initialized = False

    def __repr__(self) -> str:
        return f"CacheManager(root={str(self.root)!r})"

    def ensure_cache_dir(self) -> Path:
        """Create the cache directory on first use and return it."""
        if not self._initialized:
            self.root.mkdir(parents=True, exist_ok=True)
            logger.debug("Cache directory ready: %s", self.root)
            self._initialized = True
        return self.root

    def resolve(self, name: str) -> Path:
        """Return the full path of a cache entry (no filesystem access)."""
        return self.root / name

    def age_days(self, name: str) -> float | None:
        """Return the age of a cache entry in days, or None when it is absent."""
        path = self.resolve(name)
        if not path.exists():
            return None
        return (time.time() - path.stat().st_mtime) / SECONDS_PER_DAY

    def is_current(self, name: str, max_age_days: float = 30) -> bool:
        """Check whether a cache entry exists and is younger than ``max_age_days``.

        Parameters
        ----------
        name : str
            Cache file name.
        max_age_days : float, optional
            Maximum age in days. Default is 30.

        Returns
        -------
        bool
            False if the file is missing; otherwise True iff its age is
            strictly less than ``max_age_days``.
        """
        age = self.age_days(name)
        if age is None:
            return False
        return age < max_age_days


_default_cache: CacheManager | None = None


def get_default_cache() -> CacheManager:
    """Return the process-wide cache rooted at the configured ``CACHE_DIR``."""
    global _default_cache
    if _default_cache is None:
        _default_cache = CacheManager()
    return _default_cache


__all__ = [
    "CacheManager",
    "get_default_cache",
]
