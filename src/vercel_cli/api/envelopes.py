"""
Response envelopes for list endpoints.

Vercel list endpoints answer either with a bare JSON array or with an object that
wraps the array under a named field (``{"deployments": [...], "pagination": {...}}``).
The shape is resolved once, right after the request, so renderers only ever see a
plain sequence of records.
"""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict


class ListEnvelope(BaseModel):
    """Payload was a bare array of records."""

    model_config = ConfigDict(frozen=True)

    items: List[Any]

    @property
    def records(self) -> List[Any]:
        return self.items


class WrappedEnvelope(BaseModel):
    """Payload was an object carrying the records under a named field."""

    model_config = ConfigDict(frozen=True)

    items: List[Any]

    @property
    def records(self) -> List[Any]:
        return self.items


Envelope = Union[ListEnvelope, WrappedEnvelope]


def unwrap(payload: Any, key: str) -> Envelope:
    """Resolve ``payload`` into an envelope, reading wrapped records from ``key``.

    Anything that is neither a list nor a mapping holding a list (``None``, a
    missing field, a scalar) resolves to an empty envelope.
    """
    if isinstance(payload, list):
        return ListEnvelope(items=payload)

    items = payload.get(key) if isinstance(payload, dict) else None
    if not isinstance(items, list):
        items = []
    return WrappedEnvelope(items=items)
