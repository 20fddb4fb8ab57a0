"""Action types - descriptors, listing and invocation."""

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field

from greeting_server.types.base import Descriptor, ProtocolModel, RequestParams, Result


class InputSchema(Descriptor):
    """A JSON Schema object describing an action's arguments."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    type: Literal["object"] = "object"
    properties: dict[str, dict[str, Any]] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class ActionDescriptor(Descriptor):
    """Definition of an action the server provides."""

    name: str
    description: str
    input_schema: Annotated[InputSchema, Field(alias="inputSchema")]


class TextContent(ProtocolModel):
    """Text produced by an action."""

    type: Literal["text"] = "text"
    text: str


class ListActionsParams(RequestParams):
    """Parameters for list_actions."""

    cursor: str | None = None


class ListActionsResult(Result):
    """Server's response to list_actions."""

    actions: list[ActionDescriptor]


class InvokeActionParams(RequestParams):
    """Parameters for invoke_action."""

    name: str
    arguments: dict[str, Any] | None = None


class InvokeActionResult(Result):
    """Server's response to invoke_action."""

    content: list[TextContent]
    is_error: Annotated[bool, Field(alias="isError")] = False
