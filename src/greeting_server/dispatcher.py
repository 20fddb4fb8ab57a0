"""Dispatcher - routes one request to the registry and encodes the outcome.

No I/O, no lifecycle, no transport knowledge. Every request yields exactly one
response: either a result or a structured error. Route steps return
``Result | ErrorData`` rather than raising, so a failing handler never escapes
as an uncaught fault.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from greeting_server.registry import ActionOutput, CapabilityRegistry
from greeting_server.types.actions import (
    InvokeActionParams,
    InvokeActionResult,
    ListActionsParams,
    ListActionsResult,
    TextContent,
)
from greeting_server.types.base import RequestParams, Result
from greeting_server.types.json_rpc import (
    ErrorCode,
    ErrorData,
    JSONRPCErrorResponse,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResultResponse,
)
from greeting_server.types.resources import (
    ListResourcesParams,
    ListResourcesResult,
    ReadResourceParams,
    ReadResourceResult,
    TextResourceContents,
)
from greeting_server.utilities.logging import get_logger
from greeting_server.validation import describe_validation_error, validate_arguments

logger = get_logger(__name__)

ParamsT = TypeVar("ParamsT", bound=RequestParams)
Route = Callable[[dict[str, Any]], Result | ErrorData]


def _parse_params(model: type[ParamsT], params: dict[str, Any]) -> ParamsT | ErrorData:
    try:
        return model.model_validate(params)
    except ValidationError as e:
        return ErrorData(code=ErrorCode.INVALID_PARAMS, message=f"Invalid params: {describe_validation_error(e)}")


def _to_invoke_result(output: ActionOutput) -> InvokeActionResult:
    """Normalize what an action handler returned into an InvokeActionResult."""
    if isinstance(output, InvokeActionResult):
        return output
    if isinstance(output, str):
        return InvokeActionResult(content=[TextContent(text=output)])
    if isinstance(output, list | tuple) and all(isinstance(block, TextContent) for block in output):
        return InvokeActionResult(content=list(output))
    raise TypeError(f"Unexpected return type from action: {type(output).__name__}")


class Dispatcher:
    """Routes list_actions, invoke_action, list_resources and read_resource.

    Usage:
        dispatcher = Dispatcher(registry)
        response = dispatcher.dispatch(JSONRPCRequest(id=1, method="list_actions"))
    """

    def __init__(self, registry: CapabilityRegistry, *, strict_enums: bool = False) -> None:
        self.registry = registry
        self.strict_enums = strict_enums
        self._routes: dict[str, Route] = {
            "list_actions": self._list_actions,
            "invoke_action": self._invoke_action,
            "list_resources": self._list_resources,
            "read_resource": self._read_resource,
        }

    def dispatch(self, request: JSONRPCRequest) -> JSONRPCResponse:
        """Dispatch a request to the matching route and encode the outcome."""
        route = self._routes.get(request.method)
        if route is None:
            return JSONRPCErrorResponse(
                id=request.id,
                error=ErrorData(code=ErrorCode.METHOD_NOT_FOUND, message=f"Method not found: {request.method}"),
            )

        outcome = route(request.params or {})
        if isinstance(outcome, ErrorData):
            logger.debug("Request %s (%s) failed: %s", request.id, request.method, outcome.message)
            return JSONRPCErrorResponse(id=request.id, error=outcome)
        return JSONRPCResultResponse(id=request.id, result=outcome.model_dump(by_alias=True, exclude_none=True))

    def _list_actions(self, params: dict[str, Any]) -> ListActionsResult | ErrorData:
        parsed = _parse_params(ListActionsParams, params)
        if isinstance(parsed, ErrorData):
            return parsed
        return ListActionsResult(actions=self.registry.list_actions())

    def _list_resources(self, params: dict[str, Any]) -> ListResourcesResult | ErrorData:
        parsed = _parse_params(ListResourcesParams, params)
        if isinstance(parsed, ErrorData):
            return parsed
        return ListResourcesResult(resources=self.registry.list_resources())

    def _invoke_action(self, params: dict[str, Any]) -> InvokeActionResult | ErrorData:
        parsed = _parse_params(InvokeActionParams, params)
        if isinstance(parsed, ErrorData):
            return parsed

        descriptor = self.registry.get_action(parsed.name)
        handler = self.registry.get_action_handler(parsed.name)
        if descriptor is None or handler is None:
            return ErrorData(code=ErrorCode.METHOD_NOT_FOUND, message=f"Unknown action: {parsed.name}")

        arguments = validate_arguments(descriptor.input_schema, parsed.arguments, strict_enums=self.strict_enums)
        if isinstance(arguments, ErrorData):
            return arguments

        try:
            return _to_invoke_result(handler(arguments))
        except Exception as e:
            logger.exception("Action %s failed", parsed.name)
            return ErrorData(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Error executing action {parsed.name}: {e}",
                data={"action": parsed.name, "error": str(e)},
            )

    def _read_resource(self, params: dict[str, Any]) -> ReadResourceResult | ErrorData:
        parsed = _parse_params(ReadResourceParams, params)
        if isinstance(parsed, ErrorData):
            return parsed

        descriptor = self.registry.get_resource(parsed.uri)
        handler = self.registry.get_resource_handler(parsed.uri)
        if descriptor is None or handler is None:
            return ErrorData(code=ErrorCode.INVALID_REQUEST, message=f"Unknown resource: {parsed.uri}")

        try:
            text = handler(parsed.uri)
            if not isinstance(text, str):
                raise TypeError(f"Unexpected return type from resource: {type(text).__name__}")
        except Exception as e:
            logger.exception("Reading resource %s failed", parsed.uri)
            return ErrorData(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Error reading resource {parsed.uri}: {e}",
                data={"uri": parsed.uri, "error": str(e)},
            )

        return ReadResourceResult(
            contents=[TextResourceContents(uri=parsed.uri, mime_type=descriptor.mime_type, text=text)]
        )
