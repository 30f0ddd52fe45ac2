"""Allow-list lookup that wires the database range source to the matcher."""

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError

from recordcheck.config import Config
from recordcheck.clients.database import RangeSource
from recordcheck.ip.matcher import is_allowed

logger = logging.getLogger(__name__)


class AllowListChecker:
    """Checks IPv4 addresses against the configured allow-list."""

    def __init__(self, config: Config):
        self.config = config
        self._source: Optional[RangeSource] = None

    @property
    def source(self) -> RangeSource:
        """Lazily created range source; requires a database URL."""
        if self._source is None:
            if not self.config.database_url:
                raise ValueError("DATABASE_URL is required to read the allow-list")
            self._source = RangeSource(
                self.config.database_url, table=self.config.ranges_table
            )
        return self._source

    def check(self, ip_address: str, ranges: Optional[Iterable[str]] = None) -> bool:
        """Check an address against explicit ranges or the database allow-list.

        Args:
            ip_address: IPv4 address to check.
            ranges: Range specifiers to use instead of the database table.

        Returns:
            True if the address is allowed. A database error denies the address.
        """
        if ranges is None:
            try:
                ranges = self.source.fetch_ranges()
            except SQLAlchemyError as e:
                logger.error(f"Database error while reading allow-list: {e}")
                return False

        allowed = is_allowed(ip_address, ranges)
        logger.info("IP %s is %s", ip_address, "allowed" if allowed else "denied")
        return allowed

    def close(self) -> None:
        if self._source is not None:
            self._source.close()
            self._source = None
