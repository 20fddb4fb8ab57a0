"""ServerSession - protocol machinery in front of the dispatcher.

Handles the initialize handshake, ping and client notifications so the
dispatcher only ever sees its four application methods.
"""

from __future__ import annotations

from pydantic import ValidationError

from greeting_server.dispatcher import Dispatcher
from greeting_server.types.base import LATEST_PROTOCOL_VERSION
from greeting_server.types.initialize import Implementation, InitializeRequestParams, InitializeResult
from greeting_server.types.json_rpc import (
    ErrorCode,
    ErrorData,
    JSONRPCErrorResponse,
    JSONRPCMessage,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResultResponse,
)
from greeting_server.utilities.logging import get_logger
from greeting_server.validation import describe_validation_error

logger = get_logger(__name__)


class ServerSession:
    """Handles one message at a time and returns the response to send, if any.

    Usage:
        session = ServerSession(dispatcher, server_info=Implementation(name="greeting-server", version="1.0.0"))
        response = session.handle_message(message)
    """

    def __init__(self, dispatcher: Dispatcher, *, server_info: Implementation) -> None:
        self.dispatcher = dispatcher
        self.server_info = server_info
        self.client_info: Implementation | None = None

    def handle_message(self, message: JSONRPCMessage) -> JSONRPCResponse | None:
        """Dispatch a single message.

        Requests always produce a response. Notifications and responses from
        the client produce none.
        """
        if isinstance(message, JSONRPCRequest):
            if message.method == "initialize":
                return self._handle_initialize(message)
            if message.method == "ping":
                return JSONRPCResultResponse(id=message.id, result={})
            return self.dispatcher.dispatch(message)

        if isinstance(message, JSONRPCNotification):
            if message.method != "notifications/initialized":
                logger.debug("Ignoring notification %s", message.method)
            return None

        logger.debug("Ignoring response from client for request %s", message.id)
        return None

    def _handle_initialize(self, request: JSONRPCRequest) -> JSONRPCResponse:
        try:
            params = InitializeRequestParams.model_validate(request.params or {})
        except ValidationError as e:
            return JSONRPCErrorResponse(
                id=request.id,
                error=ErrorData(
                    code=ErrorCode.INVALID_PARAMS, message=f"Invalid params: {describe_validation_error(e)}"
                ),
            )

        self.client_info = params.client_info
        logger.info("Client connected: %s %s", params.client_info.name, params.client_info.version)

        result = InitializeResult(
            protocol_version=LATEST_PROTOCOL_VERSION,
            capabilities=self.dispatcher.registry.capabilities(),
            server_info=self.server_info,
        )
        return JSONRPCResultResponse(id=request.id, result=result.model_dump(by_alias=True, exclude_none=True))
