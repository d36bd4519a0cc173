"""
GitHub webhook adapter.

Verifies the ``X-Hub-Signature-256`` header of a delivery against the app's
webhook secret, decodes the payload and hands it to the Safe Settings app.
Every failure is raised to the caller; the dispatcher decides what the
client gets to see.
"""

import base64
import hashlib
import hmac
import json
from typing import Any, Callable, Dict, Mapping, Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from settings_sync.handlers.models.env_vars import SyncConfig
from settings_sync.handlers.utils.responses import create_envelope
from settings_sync.logic.exceptions import WebhookEventError, WebhookSignatureError
from settings_sync.logic.production_sync import SyncEngine, WebhookReceiver, load_production_engine
from settings_sync.models.input import WebhookEvent

SIGNATURE_PREFIX = 'sha256='


def compute_signature(secret: str, body: bytes) -> str:
    """Return the ``sha256=``-prefixed HMAC GitHub sends for ``body``."""
    digest = hmac.new(secret.encode('utf-8'), body, hashlib.sha256).hexdigest()
    return f'{SIGNATURE_PREFIX}{digest}'


class GitHubWebhookAdapter:
    """Signature verification and event routing for GitHub deliveries."""

    def __init__(self, secret: str, app: Any, logger: Optional[Logger] = None):
        if not secret:
            raise ValueError('webhook secret must not be empty')
        self._secret = secret
        self._app = app
        self._logger = logger

    def verify_signature(self, body: bytes, signature: Optional[str]) -> None:
        """
        Check a delivery signature.

        Raises:
            WebhookSignatureError: Signature absent or not matching the body
        """
        if not signature:
            raise WebhookSignatureError('Missing X-Hub-Signature-256 header')

        expected = compute_signature(self._secret, body)
        if not hmac.compare_digest(expected, signature):
            raise WebhookSignatureError('Webhook signature does not match payload')

    def handle(self, event: Mapping[str, Any], context: LambdaContext) -> Dict[str, Any]:
        """
        Verify and route one webhook delivery.

        Returns:
            200 envelope acknowledging the delivery
        """
        webhook = WebhookEvent.model_validate(event)
        headers = webhook.headers

        if not headers.event_type:
            raise WebhookEventError('Missing X-GitHub-Event header')

        raw_body = self._raw_body(webhook)
        self.verify_signature(raw_body, headers.signature)

        try:
            payload = json.loads(raw_body) if raw_body else {}
        except ValueError as exc:
            raise WebhookEventError(f'Webhook body is not valid JSON: {exc}') from exc

        if isinstance(self._app, WebhookReceiver):
            self._app.receive(headers.event_type, headers.delivery_id, payload)
        elif self._logger is not None:
            self._logger.debug('App does not handle webhook events', extra={'github_event': headers.event_type})

        return create_envelope(200, {
            'ok': True,
            'event': headers.event_type,
            'deliveryId': headers.delivery_id,
            'requestId': context.aws_request_id,
        })

    @staticmethod
    def _raw_body(webhook: WebhookEvent) -> bytes:
        body = webhook.body or ''
        if webhook.is_base64_encoded:
            return base64.b64decode(body)
        return body.encode('utf-8')


def create_webhook_adapter(
    config: SyncConfig,
    logger: Optional[Logger] = None,
    engine_factory: Callable[[SyncConfig], SyncEngine] = load_production_engine,
) -> GitHubWebhookAdapter:
    """Build the adapter for one invocation from its configuration snapshot."""
    return GitHubWebhookAdapter(
        secret=config.credentials.webhook_secret or '',
        app=engine_factory(config),
        logger=logger,
    )
