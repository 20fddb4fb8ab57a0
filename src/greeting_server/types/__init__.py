from greeting_server.types.actions import (
    ActionDescriptor,
    InputSchema,
    InvokeActionParams,
    InvokeActionResult,
    ListActionsParams,
    ListActionsResult,
    TextContent,
)
from greeting_server.types.base import LATEST_PROTOCOL_VERSION
from greeting_server.types.initialize import (
    Implementation,
    InitializeRequestParams,
    InitializeResult,
    ServerCapabilities,
)
from greeting_server.types.json_rpc import (
    ErrorCode,
    ErrorData,
    JSONRPCErrorResponse,
    JSONRPCMessage,
    JSONRPCMessageAdapter,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResultResponse,
    RequestId,
)
from greeting_server.types.resources import (
    ListResourcesParams,
    ListResourcesResult,
    ReadResourceParams,
    ReadResourceResult,
    ResourceDescriptor,
    TextResourceContents,
)

__all__ = [
    "LATEST_PROTOCOL_VERSION",
    "ActionDescriptor",
    "ErrorCode",
    "ErrorData",
    "Implementation",
    "InitializeRequestParams",
    "InitializeResult",
    "InputSchema",
    "InvokeActionParams",
    "InvokeActionResult",
    "JSONRPCErrorResponse",
    "JSONRPCMessage",
    "JSONRPCMessageAdapter",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "JSONRPCResultResponse",
    "ListActionsParams",
    "ListActionsResult",
    "ListResourcesParams",
    "ListResourcesResult",
    "ReadResourceParams",
    "ReadResourceResult",
    "RequestId",
    "ResourceDescriptor",
    "ServerCapabilities",
    "TextContent",
    "TextResourceContents",
]
