"""
Webhooks Handler - dispatches GitHub webhook deliveries to Safe Settings.

Flow per invocation: log the invocation, gate on the GitHub App credentials,
delegate to the webhook adapter and return its envelope unchanged. Any
failure is logged with its traceback and answered with a generic 500; the
caller never sees internal error details.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from settings_sync.handlers.models.env_vars import SyncConfig, load_config
from settings_sync.handlers.utils.observability import configure_logger
from settings_sync.handlers.utils.observability import logger as default_logger
from settings_sync.handlers.utils.observability import metrics, tracer
from settings_sync.handlers.utils.responses import failure_response
from settings_sync.logic.environment_gate import validate_environment
from settings_sync.logic.webhook_adapter import create_webhook_adapter
from settings_sync.models.input import read_webhook_headers

EVENT_SOURCE = 'github-webhook'

# JMESPath to the delivery id, used as the log correlation id
GITHUB_DELIVERY_CORRELATION_PATH = 'headers."x-github-delivery"'

MISSING_ENV_ERROR = 'Missing required environment variables'
INTERNAL_ERROR = 'Internal server error'

AdapterFactory = Callable[[SyncConfig, Logger], Any]


class WebhookDispatcher:
    """Turns one webhook delivery into exactly one response envelope."""

    def __init__(self, adapter_factory: AdapterFactory = create_webhook_adapter, logger: Optional[Logger] = None):
        self.adapter_factory = adapter_factory
        self.logger = logger or default_logger

    def handle(
        self,
        event: Mapping[str, Any],
        context: LambdaContext,
        config: Optional[SyncConfig] = None,
    ) -> Dict[str, Any]:
        request_id = getattr(context, 'aws_request_id', 'unknown')

        try:
            if config is None:
                config = load_config()
            configure_logger(self.logger, config)

            headers = read_webhook_headers(event)
            self.logger.info(
                'Webhook handler invoked',
                extra={
                    'request_id': request_id,
                    'event_source': EVENT_SOURCE,
                    'github_event': headers.event_type,
                    'github_delivery': headers.delivery_id,
                },
            )

            gate = validate_environment(config, self.logger, request_id)
            if not gate.ok:
                return failure_response(request_id, 500, {
                    'error': MISSING_ENV_ERROR,
                    'missingVariables': list(gate.missing),
                })

            adapter = self.adapter_factory(config, self.logger)
            result = adapter.handle(event, context)

            self.logger.info('Webhook handler completed successfully', extra={'request_id': request_id})
            return result

        except Exception as exc:
            self.logger.exception(
                'Webhook handler failed',
                extra={'request_id': request_id, 'error': str(exc)},
            )
            return failure_response(request_id, 500, {'error': INTERNAL_ERROR})


dispatcher = WebhookDispatcher()


@tracer.capture_lambda_handler
@default_logger.inject_lambda_context(correlation_id_path=GITHUB_DELIVERY_CORRELATION_PATH)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Webhooks Lambda function handler.

    Args:
        event: API Gateway proxy event with a GitHub delivery
        context: Lambda context object

    Returns:
        Response envelope
    """
    metrics.add_metric(name='WebhookInvocations', unit=MetricUnit.Count, value=1)
    response = dispatcher.handle(event, context)

    if response['statusCode'] >= 500:
        metrics.add_metric(name='WebhookFailures', unit=MetricUnit.Count, value=1)
    return response
