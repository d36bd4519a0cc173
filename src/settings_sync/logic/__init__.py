"""
Business Logic Layer Module.

- environment_gate: GitHub App credential validation
- mode_selector: Choice between the mock and production sync engines
- mock_sync: Development sync engine
- production_sync: Loader for the externally supplied Safe Settings app
- webhook_adapter: Signature verification and routing of GitHub deliveries
"""

from settings_sync.logic.environment_gate import GateResult, validate_environment
from settings_sync.logic.mode_selector import SyncMode, select_mode

__all__ = [
    "GateResult",
    "validate_environment",
    "SyncMode",
    "select_mode",
]
