"""
Loader for the production Safe Settings app.

The production app is not part of this repository; the deployment package
ships it as an importable module (``SAFE_SETTINGS_APP_MODULE``) exposing
``create_app(config)``. The returned object must provide
``sync_installation()`` and may provide
``receive(event_name, delivery_id, payload)`` for webhook deliveries.
"""

import importlib
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from settings_sync.handlers.models.env_vars import SyncConfig
from settings_sync.logic.exceptions import ProductionEngineNotFoundError

APP_FACTORY_NAME = 'create_app'


@runtime_checkable
class SyncEngine(Protocol):
    """Anything able to synchronize settings for the app installation."""

    def sync_installation(self) -> Any:
        ...


@runtime_checkable
class WebhookReceiver(Protocol):
    """Engine capability for handling verified webhook deliveries."""

    def receive(self, event_name: str, delivery_id: Optional[str], payload: Dict[str, Any]) -> Any:
        ...


def load_production_engine(config: SyncConfig) -> SyncEngine:
    """
    Import the production app and build an engine for this invocation.

    Args:
        config: Configuration snapshot, passed to the app factory

    Returns:
        Engine exposing ``sync_installation``

    Raises:
        ProductionEngineNotFoundError: Module or factory missing from the deployment
    """
    try:
        module = importlib.import_module(config.app_module)
    except ModuleNotFoundError as exc:
        # Only mask the app module itself; broken transitive imports still surface
        missing = exc.name or ''
        if config.app_module != missing and not config.app_module.startswith(f'{missing}.'):
            raise
        raise ProductionEngineNotFoundError(config.app_module) from exc

    factory = getattr(module, APP_FACTORY_NAME, None)
    if not callable(factory):
        raise ProductionEngineNotFoundError(config.app_module)

    return factory(config)
