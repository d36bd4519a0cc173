"""
Response envelope helpers.

Every handler invocation ends in exactly one envelope of the form
``{"statusCode": int, "body": str}`` where the body is JSON text that always
carries the invocation's ``requestId``.
"""

import json
from typing import Any, Dict, Mapping, Optional

from settings_sync.models.output import ResponseEnvelope


def create_envelope(status_code: int, body: Mapping[str, Any]) -> Dict[str, Any]:
    """Serialize a body mapping into a Lambda response envelope."""
    envelope = ResponseEnvelope(status_code=status_code, body=json.dumps(body, default=str))
    return envelope.model_dump(by_alias=True)


def success_response(request_id: str, message: str, result: Any) -> Dict[str, Any]:
    """Build a 200 envelope for a completed sync."""
    return create_envelope(200, {
        'success': True,
        'message': message,
        'result': result,
        'requestId': request_id,
    })


def failure_response(
    request_id: str,
    status_code: int = 500,
    fields: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Build an error envelope; ``requestId`` overrides any colliding field."""
    body = dict(fields or {})
    body['requestId'] = request_id
    return create_envelope(status_code, body)
