"""
Scheduler Handler - runs a full Safe Settings sync.

Invoked by EventBridge on a schedule or directly with ``{"sync": true}``.
Development invocations without credentials use the mock engine; everything
else goes to the production app. Failures are answered with a 500 whose body
echoes the error message.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from settings_sync.handlers.models.env_vars import SyncConfig, load_config
from settings_sync.handlers.utils.observability import configure_logger
from settings_sync.handlers.utils.observability import logger as default_logger
from settings_sync.handlers.utils.observability import metrics, tracer
from settings_sync.handlers.utils.responses import failure_response, success_response
from settings_sync.logic.mock_sync import MockSyncEngine
from settings_sync.logic.mode_selector import SyncMode, select_mode
from settings_sync.logic.production_sync import SyncEngine, load_production_engine
from settings_sync.models.input import as_mapping, as_text, parse_incoming_event

DEFAULT_EVENT_SOURCE = 'manual'
DEFAULT_DETAIL_TYPE = 'unknown'

DEVELOPMENT_SUCCESS = 'Development sync completed successfully'
PRODUCTION_SUCCESS = 'Sync completed successfully'


class SchedulerDispatcher:
    """Turns one schedule or manual sync event into exactly one response envelope."""

    def __init__(
        self,
        mock_engine: Optional[SyncEngine] = None,
        production_engine_factory: Callable[[SyncConfig], SyncEngine] = load_production_engine,
        logger: Optional[Logger] = None,
    ):
        self.logger = logger or default_logger
        self.mock_engine = mock_engine or MockSyncEngine(logger=self.logger)
        self.production_engine_factory = production_engine_factory

    def handle(
        self,
        event: Optional[Mapping[str, Any]],
        context: LambdaContext,
        config: Optional[SyncConfig] = None,
    ) -> Dict[str, Any]:
        request_id = getattr(context, 'aws_request_id', 'unknown')

        try:
            if config is None:
                config = load_config()
            configure_logger(self.logger, config)

            raw = as_mapping(event)
            self.logger.info(
                'Scheduler handler invoked',
                extra={
                    'request_id': request_id,
                    'event_source': as_text(raw.get('source')) or DEFAULT_EVENT_SOURCE,
                    'event_detail_type': as_text(raw.get('detail-type')) or DEFAULT_DETAIL_TYPE,
                },
            )
            parsed = parse_incoming_event(event)
            self.logger.debug('Scheduler event parsed', extra={'event_kind': type(parsed).__name__})

            if select_mode(config) is SyncMode.DEVELOPMENT:
                self.logger.info('Using development mode with mock implementation', extra={'request_id': request_id})
                result = self.mock_engine.sync_installation()
                self.logger.info(
                    'Development scheduler completed successfully',
                    extra={'request_id': request_id, 'result': result},
                )
                return success_response(request_id, DEVELOPMENT_SUCCESS, result)

            engine = self.production_engine_factory(config)
            result = engine.sync_installation()
            self.logger.info('Scheduler handler completed successfully', extra={'request_id': request_id})
            return success_response(request_id, PRODUCTION_SUCCESS, result)

        except Exception as exc:
            self.logger.exception(
                'Scheduler handler failed',
                extra={'request_id': request_id, 'error': str(exc)},
            )
            return failure_response(request_id, 500, {'success': False, 'error': str(exc)})


dispatcher = SchedulerDispatcher()


@tracer.capture_lambda_handler
@default_logger.inject_lambda_context(correlation_id_path=correlation_paths.EVENT_BRIDGE)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Scheduler Lambda function handler.

    Args:
        event: EventBridge scheduled event or ``{"sync": true}`` manual trigger
        context: Lambda context object

    Returns:
        Response envelope
    """
    metrics.add_metric(name='SyncInvocations', unit=MetricUnit.Count, value=1)
    response = dispatcher.handle(event, context)

    if response['statusCode'] == 200:
        metrics.add_metric(name='SyncSuccess', unit=MetricUnit.Count, value=1)
    else:
        metrics.add_metric(name='SyncFailure', unit=MetricUnit.Count, value=1)
    return response
