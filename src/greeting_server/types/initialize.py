"""Initialize Types - Types for the initialize handshake."""

from typing import Annotated, Any

from pydantic import Field

from greeting_server.types.base import ProtocolModel, RequestParams, Result


class Implementation(ProtocolModel):
    """Describes the name and version of a client or server implementation."""

    name: str
    version: str


class ServerCapabilities(ProtocolModel):
    """Capabilities that the server advertises."""

    actions: dict[str, Any] | None = None
    resources: dict[str, Any] | None = None


class InitializeRequestParams(RequestParams):
    """Parameters for the initialize request."""

    protocol_version: Annotated[str, Field(alias="protocolVersion")]
    capabilities: dict[str, Any] = Field(default_factory=dict)
    client_info: Annotated[Implementation, Field(alias="clientInfo")]


class InitializeResult(Result):
    """Server's response to an initialize request."""

    protocol_version: Annotated[str, Field(alias="protocolVersion")]
    capabilities: ServerCapabilities
    server_info: Annotated[Implementation, Field(alias="serverInfo")]
