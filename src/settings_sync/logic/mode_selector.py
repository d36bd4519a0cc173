"""Selection between the mock and production sync engines."""

from enum import Enum

from settings_sync.handlers.models.env_vars import SyncConfig


class SyncMode(str, Enum):
    """Which sync engine handles an invocation."""

    DEVELOPMENT = 'development'
    PRODUCTION = 'production'


def select_mode(config: SyncConfig) -> SyncMode:
    """
    Pick the sync engine for an invocation.

    Development is chosen only when NODE_ENV is "development" and no
    credential is configured at all. Any configured credential selects
    production, and outside development missing credentials are left to
    fail in the production engine rather than silently switching to the mock.
    """
    if config.is_development and config.credentials.is_empty:
        return SyncMode.DEVELOPMENT
    return SyncMode.PRODUCTION
