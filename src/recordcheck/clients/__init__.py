"""External data source clients."""

from recordcheck.clients.database import RangeSource

__all__ = ["RangeSource"]
