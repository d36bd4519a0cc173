"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables used by
the Safe Settings handlers and the immutable per-invocation configuration
snapshot built from it. Handlers read the environment exactly once per
invocation through ``load_config``; everything downstream receives the
resulting ``SyncConfig`` value.
"""

import os
from dataclasses import dataclass, field
from typing import Annotated, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

DEVELOPMENT = 'development'
DEFAULT_APP_MODULE = 'safe_settings_app'


class SyncEnvVars(BaseModel):
    """Environment variables for the Safe Settings handlers."""

    # Runtime environment name; "development" enables the mock sync engine
    NODE_ENV: Annotated[Optional[str], Field(
        description='Runtime environment (development, production, ...)'
    )] = None

    # "debug" switches every log record to structured JSON
    LOG_LEVEL: Annotated[str, Field(
        description='Log verbosity for application logging'
    )] = 'info'

    # GitHub App credentials
    APP_ID: Annotated[Optional[str], Field(
        description='GitHub App identifier'
    )] = None

    PRIVATE_KEY: Annotated[Optional[str], Field(
        description='GitHub App private key (PEM)'
    )] = None

    WEBHOOK_SECRET: Annotated[Optional[str], Field(
        description='Secret used to sign GitHub webhook deliveries'
    )] = None

    # Module providing the production Safe Settings app
    SAFE_SETTINGS_APP_MODULE: Annotated[str, Field(
        description='Dotted import path of the production Safe Settings app',
        min_length=1
    )] = DEFAULT_APP_MODULE

    @field_validator('APP_ID', 'PRIVATE_KEY', 'WEBHOOK_SECRET', 'NODE_ENV')
    @classmethod
    def empty_as_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings as unset."""
        return v or None


@dataclass(frozen=True)
class Credentials:
    """GitHub App credentials; any missing field fails validation."""

    app_id: Optional[str] = None
    private_key: Optional[str] = None
    webhook_secret: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.app_id or self.private_key or self.webhook_secret)


@dataclass(frozen=True)
class SyncConfig:
    """Immutable configuration snapshot for a single invocation."""

    node_env: Optional[str] = None
    log_level: str = 'info'
    credentials: Credentials = field(default_factory=Credentials)
    app_module: str = DEFAULT_APP_MODULE
    # Names of every variable present in the environment, for diagnostics
    env_keys: Tuple[str, ...] = ()

    @property
    def is_development(self) -> bool:
        return self.node_env == DEVELOPMENT

    @property
    def debug_logging(self) -> bool:
        return self.log_level == 'debug'


def load_config(environ: Optional[Mapping[str, str]] = None) -> SyncConfig:
    """
    Build a configuration snapshot from the environment.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``

    Returns:
        Validated, immutable configuration snapshot
    """
    source = dict(os.environ if environ is None else environ)
    env_vars = SyncEnvVars.model_validate(source)

    return SyncConfig(
        node_env=env_vars.NODE_ENV,
        log_level=env_vars.LOG_LEVEL,
        credentials=Credentials(
            app_id=env_vars.APP_ID,
            private_key=env_vars.PRIVATE_KEY,
            webhook_secret=env_vars.WEBHOOK_SECRET,
        ),
        app_module=env_vars.SAFE_SETTINGS_APP_MODULE,
        env_keys=tuple(sorted(source)),
    )
