"""
Output models for handler responses using Pydantic.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """Lambda response returned by every handler invocation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status_code: Annotated[int, Field(
        alias='statusCode',
        description='HTTP status code',
        examples=[200, 500]
    )]

    body: Annotated[str, Field(
        description='JSON-encoded response body'
    )]


class MockSyncResult(BaseModel):
    """Result reported by the development sync engine."""

    success: bool = True

    message: Annotated[str, Field(
        description='Human readable outcome'
    )] = 'Mock sync completed'

    timestamp: Annotated[str, Field(
        description='ISO8601 time of the sync'
    )]

    environment: Literal['development'] = 'development'
