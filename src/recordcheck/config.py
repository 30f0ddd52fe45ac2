"""Configuration module for recordcheck."""

import os
import logging
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


class Config:
    """Application configuration."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        ranges_table: str = "ip_ranges",
        export_dir: str = ".",
        export_extension: str = "csv",
        dry_run: bool = False,
    ):
        self.database_url = database_url
        self.ranges_table = ranges_table
        self.export_dir = export_dir
        self.export_extension = export_extension
        self.dry_run = dry_run

    @classmethod
    def from_env(cls, dry_run: bool = False, require_database: bool = False) -> "Config":
        """Create configuration from environment variables.

        Reads DATABASE_URL, IP_RANGES_TABLE, EXPORT_DIR and EXPORT_EXTENSION
        from the environment.

        Args:
            dry_run: Do not write export files.
            require_database: Treat a missing DATABASE_URL as an error.

        Raises:
            ValueError: If required environment variables are missing.
        """
        database_url = os.getenv("DATABASE_URL") or None
        ranges_table = os.getenv("IP_RANGES_TABLE") or "ip_ranges"
        export_dir = os.getenv("EXPORT_DIR") or "."
        export_extension = os.getenv("EXPORT_EXTENSION") or "csv"

        missing = []
        if require_database and not database_url:
            missing.append("DATABASE_URL")

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                "Please set them in your environment or .env file."
            )

        return cls(
            database_url=database_url,
            ranges_table=ranges_table,
            export_dir=export_dir,
            export_extension=export_extension.lstrip("."),
            dry_run=dry_run,
        )

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Reduce noise from third-party libraries
        for name in ("sqlalchemy", "sqlalchemy.engine", "sqlalchemy.pool"):
            logging.getLogger(name).setLevel(logging.WARNING)

    def __repr__(self) -> str:
        """Return string representation with the database password masked."""
        def _mask(value: Optional[str]) -> Optional[str]:
            if not value:
                return value
            try:
                return make_url(value).render_as_string(hide_password=True)
            except ArgumentError:
                return "***"

        return (
            f"Config(database_url={_mask(self.database_url)!r}, "
            f"ranges_table={self.ranges_table!r}, "
            f"export_dir={self.export_dir!r}, "
            f"export_extension={self.export_extension!r}, "
            f"dry_run={self.dry_run})"
        )
