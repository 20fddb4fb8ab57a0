"""Capability registry - the single table of advertised actions and resources.

Each entry binds a descriptor (what is advertised) to a handler (what executes).
Listing and lookup read the same table, so anything listed can be resolved.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from greeting_server.exceptions import DuplicateNameError, DuplicateURIError
from greeting_server.types.actions import ActionDescriptor, InputSchema, InvokeActionResult, TextContent
from greeting_server.types.initialize import ServerCapabilities
from greeting_server.types.resources import ResourceDescriptor
from greeting_server.utilities.logging import get_logger

logger = get_logger(__name__)

ActionOutput = InvokeActionResult | Sequence[TextContent] | str
ActionHandler = Callable[[dict[str, Any]], ActionOutput]
ResourceHandler = Callable[[str], str]


@dataclass(frozen=True)
class RegisteredAction:
    descriptor: ActionDescriptor
    handler: ActionHandler


@dataclass(frozen=True)
class RegisteredResource:
    descriptor: ResourceDescriptor
    handler: ResourceHandler


class CapabilityRegistry:
    """Holds registered actions keyed by name and resources keyed by URI.

    Usage:
        registry = CapabilityRegistry()

        @registry.action(
            name="echo",
            description="Echoes the input",
            input_schema=InputSchema(properties={"message": {"type": "string"}}, required=["message"]),
        )
        def echo(arguments: dict[str, Any]) -> str:
            return arguments["message"]
    """

    def __init__(self) -> None:
        self._actions: dict[str, RegisteredAction] = {}
        self._resources: dict[str, RegisteredResource] = {}

    def register_action(self, descriptor: ActionDescriptor, handler: ActionHandler) -> None:
        """Register an action. Raises DuplicateNameError if the name is taken."""
        if descriptor.name in self._actions:
            raise DuplicateNameError(descriptor.name)
        logger.debug("Registering action %s", descriptor.name)
        self._actions[descriptor.name] = RegisteredAction(descriptor, handler)

    def register_resource(self, descriptor: ResourceDescriptor, handler: ResourceHandler) -> None:
        """Register a resource. Raises DuplicateURIError if the URI is taken."""
        if descriptor.uri in self._resources:
            raise DuplicateURIError(descriptor.uri)
        logger.debug("Registering resource %s", descriptor.uri)
        self._resources[descriptor.uri] = RegisteredResource(descriptor, handler)

    def action(
        self, *, name: str, description: str, input_schema: InputSchema
    ) -> Callable[[ActionHandler], ActionHandler]:
        """Decorator to register a function as an action."""

        def decorator(fn: ActionHandler) -> ActionHandler:
            self.register_action(ActionDescriptor(name=name, description=description, input_schema=input_schema), fn)
            return fn

        return decorator

    def resource(
        self, *, uri: str, name: str, description: str, mime_type: str = "text/plain"
    ) -> Callable[[ResourceHandler], ResourceHandler]:
        """Decorator to register a function as a resource reader."""

        def decorator(fn: ResourceHandler) -> ResourceHandler:
            self.register_resource(
                ResourceDescriptor(uri=uri, name=name, description=description, mime_type=mime_type), fn
            )
            return fn

        return decorator

    def list_actions(self) -> list[ActionDescriptor]:
        """List all registered actions in registration order."""
        return [entry.descriptor for entry in self._actions.values()]

    def list_resources(self) -> list[ResourceDescriptor]:
        """List all registered resources in registration order."""
        return [entry.descriptor for entry in self._resources.values()]

    def get_action(self, name: str) -> ActionDescriptor | None:
        entry = self._actions.get(name)
        return entry.descriptor if entry else None

    def get_resource(self, uri: str) -> ResourceDescriptor | None:
        entry = self._resources.get(uri)
        return entry.descriptor if entry else None

    def get_action_handler(self, name: str) -> ActionHandler | None:
        entry = self._actions.get(name)
        return entry.handler if entry else None

    def get_resource_handler(self, uri: str) -> ResourceHandler | None:
        entry = self._resources.get(uri)
        return entry.handler if entry else None

    def capabilities(self) -> ServerCapabilities:
        """Derive capabilities from what has been registered."""
        caps = ServerCapabilities()
        if self._actions:
            caps.actions = {}
        if self._resources:
            caps.resources = {}
        return caps
