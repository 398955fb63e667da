"""Acquisition of OurAirports tables from local files or ourairports.com."""

import logging
from pathlib import Path
from typing import Optional, Union

import requests

from .cached import CachedSource
from ..errors import AcquisitionError
from ..kinds import RecordKind

logger = logging.getLogger(__name__)


class OurAirportsSource:
    """
    Read OurAirports CSV tables as text.

    A table is read from a local path when one is given, otherwise it is
    downloaded from the kind's URL on ourairports.com.

    Example:
        source = OurAirportsSource()
        text = source.read_text(RecordKind.RUNWAY)
    """

    DEFAULT_TIMEOUT = 30
    USER_AGENT = "ourairports-json/0.1.0"

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = DEFAULT_TIMEOUT):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def read_text(self, kind: RecordKind, path: Optional[Union[str, Path]] = None) -> str:
        """
        Get the CSV text of a table.

        Args:
            kind: Table to read
            path: Optional local file; the table is downloaded when None

        Returns:
            The full table text, header included

        Raises:
            AcquisitionError: If the file or URL cannot be read
        """
        if path is not None:
            return self.read_file(path)
        return self.download(kind)

    def read_file(self, path: Union[str, Path]) -> str:
        """Read a local table, dropping a UTF-8 byte order mark."""
        logger.info(f"Reading file {path}")
        try:
            with open(path, 'r', encoding='utf-8-sig', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise AcquisitionError(str(path), e) from e

    def download(self, kind: RecordKind) -> str:
        return self.fetch_table(kind.table)

    def fetch_table(self, table: str) -> str:
        """
        Download a published table by name, e.g. 'airports'.

        Raises:
            AcquisitionError: On network failure or an HTTP error status
        """
        url = RecordKind.from_table(table).url
        logger.info(f"Downloading from {url}")
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise AcquisitionError(url, e) from e
        # Served without a charset, so requests would guess latin-1
        try:
            return response.content.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise AcquisitionError(url, e) from e


class CachedOurAirportsSource(OurAirportsSource, CachedSource):
    """OurAirportsSource that keeps downloaded tables in a cache directory."""

    def __init__(self, cache_dir: str, session: Optional[requests.Session] = None,
                 timeout: int = OurAirportsSource.DEFAULT_TIMEOUT, max_age_days: Optional[int] = 7):
        """
        Initialize the cached source.

        Args:
            cache_dir: Base directory for caching
            session: Optional requests.Session
            timeout: HTTP request timeout in seconds
            max_age_days: Maximum age of a cached table (None for no limit)

        Raises:
            AcquisitionError: If the cache directory cannot be created
        """
        try:
            CachedSource.__init__(self, cache_dir)
        except OSError as e:
            raise AcquisitionError(str(cache_dir), e) from e
        OurAirportsSource.__init__(self, session, timeout)
        self.max_age_days = max_age_days

    def download(self, kind: RecordKind) -> str:
        try:
            return self.get_table(kind.table, max_age_days=self.max_age_days)
        except OSError as e:
            raise AcquisitionError(str(self.cache_path), e) from e
