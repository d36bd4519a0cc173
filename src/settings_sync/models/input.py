"""
Input models for the events the handlers receive.

Parsing is deliberately loose: every field is optional, unknown keys are
ignored and scalar values of the wrong type are coerced rather than rejected,
so an unexpected payload still flows through to a well-formed response
instead of failing validation up front.
"""

from typing import Annotated, Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

GITHUB_EVENT_HEADER = 'x-github-event'
GITHUB_DELIVERY_HEADER = 'x-github-delivery'
GITHUB_SIGNATURE_HEADER = 'x-hub-signature-256'


def as_text(value: Any) -> Optional[str]:
    """Coerce a loose scalar to ``str``; empty values become None."""
    if value is None or value == '':
        return None
    return value if isinstance(value, str) else str(value)


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


class WebhookHeaders(BaseModel):
    """GitHub delivery headers, matched case-insensitively."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    event_type: Annotated[Optional[str], Field(
        alias=GITHUB_EVENT_HEADER,
        description='GitHub event name',
        examples=['push', 'pull_request', 'repository']
    )] = None

    delivery_id: Annotated[Optional[str], Field(
        alias=GITHUB_DELIVERY_HEADER,
        description='Unique delivery identifier'
    )] = None

    signature: Annotated[Optional[str], Field(
        alias=GITHUB_SIGNATURE_HEADER,
        description='HMAC-SHA256 signature of the body, "sha256=" prefixed'
    )] = None

    @field_validator('*', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return as_text(v)


class WebhookEvent(BaseModel):
    """API Gateway proxy event carrying a GitHub webhook delivery."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    http_method: Annotated[Optional[str], Field(alias='httpMethod')] = None

    headers: Annotated[WebhookHeaders, Field(
        default_factory=WebhookHeaders,
        description='Request headers'
    )]

    body: Annotated[Optional[str], Field(
        description='Raw request body'
    )] = None

    is_base64_encoded: Annotated[bool, Field(alias='isBase64Encoded')] = False

    @field_validator('headers', mode='before')
    @classmethod
    def normalize_headers(cls, v: Any) -> Dict[str, Any]:
        """Lower-case header names; API Gateway preserves the sender's casing."""
        return {str(key).lower(): value for key, value in as_mapping(v).items()}

    @field_validator('http_method', 'body', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return as_text(v)

    @field_validator('is_base64_encoded', mode='before')
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        if isinstance(v, str):
            return v.strip().lower() == 'true'
        return bool(v)


class ScheduleEvent(BaseModel):
    """EventBridge scheduled event."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    source: Optional[str] = None

    detail_type: Annotated[Optional[str], Field(alias='detail-type')] = None

    # EventBridge sends an object; anything else is kept as sent
    detail: Annotated[Any, Field(default_factory=dict)]

    time: Optional[str] = None

    @field_validator('source', 'detail_type', 'time', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return as_text(v)

    @field_validator('detail', mode='before')
    @classmethod
    def default_detail(cls, v: Any) -> Any:
        return v or {}


class ManualSyncEvent(BaseModel):
    """Direct invocation requesting an immediate sync."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    sync: bool = True

    source: Optional[str] = None

    detail_type: Annotated[Optional[str], Field(alias='detail-type')] = None

    @field_validator('sync', mode='before')
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        return bool(v)

    @field_validator('source', 'detail_type', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return as_text(v)


IncomingEvent = Union[WebhookEvent, ScheduleEvent, ManualSyncEvent]


def parse_incoming_event(event: Any) -> IncomingEvent:
    """
    Classify a raw Lambda event.

    Events with ``httpMethod`` are webhook deliveries, events with a truthy
    ``sync`` flag are manual sync requests, everything else (including a
    payload that is not an object at all) is treated as a scheduled event.
    """
    event = as_mapping(event)
    if 'httpMethod' in event:
        return WebhookEvent.model_validate(event)
    if event.get('sync'):
        return ManualSyncEvent.model_validate(event)
    return ScheduleEvent.model_validate(event)


def read_webhook_headers(event: Any) -> WebhookHeaders:
    """GitHub headers of a raw delivery; absent or malformed headers read as empty."""
    headers = as_mapping(as_mapping(event).get('headers'))
    return WebhookHeaders.model_validate({str(key).lower(): value for key, value in headers.items()})
