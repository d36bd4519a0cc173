"""
Service Models Package

This package contains the Pydantic models for incoming Lambda events and
outgoing response envelopes.
"""

from .input import IncomingEvent, ManualSyncEvent, ScheduleEvent, WebhookEvent, WebhookHeaders, parse_incoming_event
from .output import MockSyncResult, ResponseEnvelope

__all__ = [
    # Input models
    "IncomingEvent",
    "ManualSyncEvent",
    "ScheduleEvent",
    "WebhookEvent",
    "WebhookHeaders",
    "parse_incoming_event",

    # Output models
    "MockSyncResult",
    "ResponseEnvelope",
]
