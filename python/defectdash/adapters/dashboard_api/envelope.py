"""
Envelope parsing for remote dashboard API responses.

Every response is wrapped as {status, message, data}. Payloads are validated
here, so malformed responses fail at this boundary and never reach the
classifiers.
"""
from functools import lru_cache
from typing import Annotated, Any, TypeVar

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from defectdash.core.errors import EnvelopeError
from defectdash.core.types import FailureEnvelope, SuccessEnvelope

T = TypeVar("T")


@lru_cache(maxsize=32)
def _envelope_adapter(data_type: Any) -> TypeAdapter:
    return TypeAdapter(
        Annotated[
            SuccessEnvelope[data_type] | FailureEnvelope,
            Field(discriminator="status"),
        ]
    )


def parse_envelope(payload: Any, data_type: Any) -> SuccessEnvelope | FailureEnvelope:
    """
    Validate a raw JSON payload as a tagged envelope.

    Status is matched case-insensitively. A "success" envelope without data
    is read as a failure.

    Raises:
        EnvelopeError: payload is not a valid envelope
    """
    if not isinstance(payload, dict):
        raise EnvelopeError("Malformed response envelope: expected a JSON object")

    normalized = dict(payload)
    status = normalized.get("status")
    if isinstance(status, str):
        normalized["status"] = status.strip().lower()
    if normalized.get("status") == "success" and normalized.get("data") is None:
        normalized["status"] = "failure"

    try:
        return _envelope_adapter(data_type).validate_python(normalized)
    except PydanticValidationError as e:
        raise EnvelopeError(
            f"Malformed response envelope: {e.error_count()} validation error(s)"
        ) from e


def unwrap_envelope(payload: Any, data_type: Any, default_message: str) -> Any:
    """
    Return the data of a success envelope.

    Args:
        payload: Decoded JSON body
        data_type: Expected type of the data field
        default_message: Error message when a failure envelope has none

    Raises:
        EnvelopeError: malformed envelope or failure status
    """
    envelope = parse_envelope(payload, data_type)
    if isinstance(envelope, FailureEnvelope):
        raise EnvelopeError(envelope.message or default_message)
    return envelope.data
