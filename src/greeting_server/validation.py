"""Argument validation against an action's declared input schema."""

from __future__ import annotations

from typing import Any

import jsonschema
from pydantic import ValidationError

from greeting_server.types.actions import InputSchema
from greeting_server.types.json_rpc import ErrorCode, ErrorData
from greeting_server.utilities.logging import get_logger

logger = get_logger(__name__)


def apply_defaults(schema: InputSchema, arguments: dict[str, Any], *, strict_enums: bool = False) -> dict[str, Any]:
    """Return a copy of ``arguments`` with declared defaults filled in.

    Omitted properties that declare a ``default`` receive it. An optional property
    whose value is outside its ``enum`` falls back to the default (or is dropped
    when none is declared) unless ``strict_enums`` is set, in which case the value
    is left for schema validation to reject.
    """
    resolved = dict(arguments)
    for field, prop in schema.properties.items():
        if field not in resolved:
            if "default" in prop:
                resolved[field] = prop["default"]
            continue

        choices = prop.get("enum")
        if strict_enums or choices is None or field in schema.required or resolved[field] in choices:
            continue

        if "default" in prop:
            logger.debug("Unsupported value %r for %s, using default %r", resolved[field], field, prop["default"])
            resolved[field] = prop["default"]
        else:
            logger.debug("Unsupported value %r for %s, ignoring it", resolved[field], field)
            del resolved[field]
    return resolved


def validate_arguments(
    schema: InputSchema, arguments: dict[str, Any] | None, *, strict_enums: bool = False
) -> dict[str, Any] | ErrorData:
    """Resolve defaults and validate arguments.

    Returns the arguments to hand to the action, or the InvalidParams error describing the mismatch.
    """
    resolved = apply_defaults(schema, arguments or {}, strict_enums=strict_enums)
    try:
        jsonschema.validate(instance=resolved, schema=schema.model_dump(by_alias=True, exclude_none=True))
    except jsonschema.ValidationError as e:
        return ErrorData(code=ErrorCode.INVALID_PARAMS, message=f"Input validation error: {e.message}")
    return resolved


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single line for an error message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "params"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
