"""Exceptions raised by the settings sync logic layer."""


class SettingsSyncError(Exception):
    """Base class for settings sync errors."""


class ProductionEngineNotFoundError(SettingsSyncError):
    """The production Safe Settings app is not present in the deployment."""

    def __init__(self, module_name: str):
        super().__init__('Production Safe Settings implementation not found - check deployment package')
        self.module_name = module_name


class WebhookSignatureError(SettingsSyncError):
    """A webhook delivery carried a missing or invalid signature."""


class WebhookEventError(SettingsSyncError):
    """A webhook delivery could not be interpreted."""
