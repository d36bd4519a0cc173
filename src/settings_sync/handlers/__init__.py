"""
AWS Lambda Handlers Module.

Handler Types:
- Webhook handler: GitHub deliveries via API Gateway (webhooks_handler)
- Scheduled handler: EventBridge triggers and manual sync requests (scheduler_handler)

Both handlers use AWS Lambda Powertools for structured logging with
correlation IDs, X-Ray tracing and custom metrics.
"""

# Re-export handler utilities for convenience
from settings_sync.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
