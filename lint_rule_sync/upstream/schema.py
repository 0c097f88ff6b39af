"""JSON schema for the GitHub contents API directory listing."""

from functools import lru_cache
from typing import Any

from jsonschema import Draft202012Validator

DIRECTORY_LISTING_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "path": {"type": "string"},
            "type": {"type": "string"},
        },
        "required": ["name"],
        "additionalProperties": True,
    },
}


def schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@lru_cache(maxsize=1)
def listing_validator() -> Draft202012Validator:
    return Draft202012Validator(DIRECTORY_LISTING_SCHEMA)


def listing_error(payload: Any) -> str | None:
    """Describe why ``payload`` is not a directory listing, or ``None``."""
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return f"expected a directory listing, got error object: {payload['message']}"
    error = next(iter(listing_validator().iter_errors(payload)), None)
    if error is None:
        return None
    return schema_error_message(error)
