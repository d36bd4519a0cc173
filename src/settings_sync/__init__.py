"""
Safe Settings Lambda Service Module.

This package contains the Lambda entry points that run the Safe Settings
GitHub App on AWS Lambda:

- handlers: Webhook and scheduler dispatchers and their Lambda handlers
- logic: Credential gate, mode selection and the sync engines
- models: Event and response models

Every invocation produces exactly one response envelope; exceptions never
escape a handler.
"""

__version__ = "1.0.0"
__description__ = "Safe Settings sync handlers for AWS Lambda"

from settings_sync.handlers.models.env_vars import SyncConfig, load_config
from settings_sync.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "SyncConfig",
    "load_config",
    "logger",
    "tracer",
    "metrics",
]
