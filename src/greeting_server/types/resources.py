"""Resource types - descriptors, listing and reading."""

from typing import Annotated

from pydantic import Field

from greeting_server.types.base import Descriptor, ProtocolModel, RequestParams, Result


class ResourceDescriptor(Descriptor):
    """A known resource that the server is capable of reading."""

    # Kept as a plain string so reads echo the URI exactly as requested
    uri: str
    name: str
    description: str
    mime_type: Annotated[str, Field(alias="mimeType")]


class TextResourceContents(ProtocolModel):
    """Text contents of a resource."""

    uri: str
    mime_type: Annotated[str | None, Field(alias="mimeType")] = None
    text: str


class ListResourcesParams(RequestParams):
    """Parameters for list_resources."""

    cursor: str | None = None


class ListResourcesResult(Result):
    """Server's response to list_resources."""

    resources: list[ResourceDescriptor]


class ReadResourceParams(RequestParams):
    """Parameters for read_resource."""

    uri: str


class ReadResourceResult(Result):
    """Server's response to read_resource."""

    contents: list[TextResourceContents]
