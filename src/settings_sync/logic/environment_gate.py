"""
Credential gate run before any GitHub-facing delegate is invoked.

The gate checks the GitHub App credentials in a fixed order and reports
exactly which ones are missing. On failure it logs which related
environment variables *are* present, to help operators spot typos.
"""

from dataclasses import dataclass
from typing import Tuple

from aws_lambda_powertools import Logger

from settings_sync.handlers.models.env_vars import SyncConfig

REQUIRED_ENV_VARS: Tuple[str, ...] = ('APP_ID', 'PRIVATE_KEY', 'WEBHOOK_SECRET')

DIAGNOSTIC_PREFIXES: Tuple[str, ...] = ('APP_', 'PRIVATE_', 'WEBHOOK_')


@dataclass(frozen=True)
class GateResult:
    """Outcome of the credential gate."""

    missing: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing


def missing_credentials(config: SyncConfig) -> Tuple[str, ...]:
    """Return the required variable names absent from the config, in declared order."""
    values = {
        'APP_ID': config.credentials.app_id,
        'PRIVATE_KEY': config.credentials.private_key,
        'WEBHOOK_SECRET': config.credentials.webhook_secret,
    }
    return tuple(name for name in REQUIRED_ENV_VARS if not values[name])


def validate_environment(config: SyncConfig, logger: Logger, request_id: str) -> GateResult:
    """
    Validate that all GitHub App credentials are configured.

    Args:
        config: Configuration snapshot for this invocation
        logger: Logger receiving the diagnostic entry on failure
        request_id: Invocation request id, for correlation

    Returns:
        GateResult listing the missing variables
    """
    result = GateResult(missing=missing_credentials(config))

    if not result.ok:
        logger.error(
            'Missing required environment variables',
            extra={
                'request_id': request_id,
                'missing_variables': list(result.missing),
                'available_vars': [key for key in config.env_keys if key.startswith(DIAGNOSTIC_PREFIXES)],
            },
        )

    return result
