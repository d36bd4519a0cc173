"""
Development sync engine.

Stands in for the production Safe Settings app when running locally without
GitHub App credentials. It performs no network I/O and its output depends
only on the injected clock.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools import Logger

from settings_sync.models.output import MockSyncResult


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MockSyncEngine:
    """Mock implementation of the Safe Settings ``sync_installation`` capability."""

    def __init__(self, logger: Optional[Logger] = None, clock: Callable[[], datetime] = _utc_now):
        self._logger = logger
        self._clock = clock

    def sync_installation(self) -> Dict[str, Any]:
        if self._logger is not None:
            self._logger.info('Mock syncInstallation called')

        result = MockSyncResult(timestamp=self._clock().isoformat())
        return result.model_dump()
