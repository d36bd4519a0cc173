"""
Centralized observability utilities for the Safe Settings Lambda handlers.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection. Log output has two strategies selected per
invocation from the configuration snapshot:

- structured: one JSON document per line (always used for errors, and for
  every record when LOG_LEVEL is ``debug``)
- plain: ``[LEVEL] message``
"""

import logging
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.logging.formatter import LambdaPowertoolsFormatter
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

from settings_sync.handlers.models.env_vars import SyncConfig

# Metrics namespace for sync KPIs
METRICS_NAMESPACE = 'SafeSettings'

SERVICE_NAME = 'safe-settings'

LOG_RECORD_ORDER = ['timestamp', 'level', 'message']


class SyncLogFormatter(LambdaPowertoolsFormatter):
    """Powertools formatter switching between JSON and plain text output."""

    def __init__(self, structured: bool = False, **kwargs: Any):
        kwargs.setdefault('log_record_order', LOG_RECORD_ORDER)
        kwargs.setdefault('use_rfc3339', True)
        kwargs.setdefault('utc', True)
        super().__init__(**kwargs)
        self.structured = structured

    def format(self, record: logging.LogRecord) -> str:
        # Error visibility is never gated by verbosity
        if self.structured or record.levelno >= logging.ERROR:
            return super().format(record)
        return f'[{record.levelname}] {record.getMessage()}'

    def serialize(self, log: Dict[str, Any]) -> str:
        log['level'] = str(log.get('level', '')).lower()
        return super().serialize(log)


def build_logger(service: str = SERVICE_NAME, stream: Optional[Any] = None) -> Logger:
    """
    Create a Powertools logger using the sync formatter.

    Args:
        service: Service name, also the name of the underlying stdlib logger
        stream: Optional sink; defaults to stdout

    Returns:
        Configured Logger instance
    """
    # Level is pinned so a free-form LOG_LEVEL never reaches the stdlib logger
    return Logger(service=service, stream=stream, level=logging.INFO, logger_formatter=SyncLogFormatter())


def configure_logger(logger: Logger, config: SyncConfig) -> None:
    """Apply one invocation's configuration snapshot to a logger."""
    formatter = logger.registered_formatter
    if isinstance(formatter, SyncLogFormatter):
        formatter.structured = config.debug_logging
    logger.setLevel(logging.DEBUG if config.debug_logging else logging.INFO)


# Service name can be overridden by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = build_logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "True"
tracer: Tracer = Tracer(service=SERVICE_NAME)

# Namespace and service name can be set by environment variables:
# - POWERTOOLS_METRICS_NAMESPACE
# - POWERTOOLS_SERVICE_NAME
metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)
