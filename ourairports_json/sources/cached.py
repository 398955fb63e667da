from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Tuple
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources that keep downloaded tables on disk.

    This class provides a caching mechanism for table downloads. It handles:
    - Storing each table as CSV text under `{cache_dir}/{source_name}/`
    - Checking cache validity based on age
    - Calling fetch_table() and caching its result when needed

    Cache files are named `table_{table}.csv`, e.g. `table_airports.csv`.
    """

    def __init__(self, cache_dir: str):
        """
        Initialize the cached source.

        Args:
            cache_dir: Base directory for caching

        Raises:
            OSError: If the cache directory cannot be created
        """
        self.cache_dir = Path(cache_dir)
        self.source_name = self.__class__.__name__.lower()
        self.cache_path = self.cache_dir / self.source_name
        self.cache_path.mkdir(parents=True, exist_ok=True)
        self._force_refresh = False
        self._never_refresh = False

    @abstractmethod
    def fetch_table(self, table: str) -> str:
        """Fetch the text of a table, bypassing the cache."""

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """
        Set whether to force refresh of cached data.

        Args:
            force_refresh: Whether to force refresh of cached data
        """
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """
        Set whether to never refresh cached data.
        If set to True, will use cached data if it exists, regardless of age.

        Args:
            never_refresh: Whether to never refresh cached data
        """
        self._never_refresh = never_refresh

    def _get_cache_file(self, table: str) -> Path:
        """Get the cache file path for a table."""
        return self.cache_path / f"table_{table}.csv"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file is valid (exists and not too old).

        Args:
            cache_file: Path to the cache file
            max_age_days: Maximum age of cache in days (None for no limit)

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh:
            return True, None
        if max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def get_table(self, table: str, max_age_days: Optional[int] = None) -> str:
        """
        Get a table from cache or fetch it if not available.

        Args:
            table: Published table name, e.g. 'airports'
            max_age_days: Maximum age of cache in days (None for no limit)

        Returns:
            The table text
        """
        cache_file = self._get_cache_file(table)

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
            with open(cache_file, 'r', encoding='utf-8', newline='') as f:
                return f.read()

        data = self.fetch_table(table)
        with open(cache_file, 'w', encoding='utf-8', newline='') as f:
            f.write(data)
        logger.info(f"{cache_file.name} [{reason}] fetched")
        return data
