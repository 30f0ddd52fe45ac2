"""
Database client for reading the IP allow-list.
Supports any SQLAlchemy URL; SQLite and MySQL are the expected backends.
"""

import logging
from typing import List

import sqlalchemy as sa
from sqlalchemy import quoted_name
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class RangeSource:
    """Reads allow-list range specifiers from the `range` column of a table."""

    def __init__(self, database_url: str, table: str = "ip_ranges"):
        """
        Initialize the range source.

        Args:
            database_url: SQLAlchemy database URL (e.g. sqlite:///ranges.db)
            table: Name of the table holding the `range` column
        """
        self.engine: Engine = sa.create_engine(database_url, pool_pre_ping=True)
        self.table = table
        # RANGE is reserved in MySQL
        range_column = sa.column(quoted_name("range", quote=True))
        self._query = sa.select(range_column).select_from(sa.table(table))

        logger.info(f"Initialized range source for {self.engine.url!r} (table={table})")

    def fetch_ranges(self) -> List[str]:
        """Fetch all range specifiers in table order, skipping NULLs."""
        with self.engine.connect() as conn:
            values = conn.execute(self._query).scalars().all()

        ranges = [str(value) for value in values if value is not None]
        logger.debug(f"Fetched {len(ranges)} ranges from {self.table}")
        return ranges

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self.engine.dispose()
