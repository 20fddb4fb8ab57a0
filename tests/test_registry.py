from __future__ import annotations as _annotations

from typing import Any

import pytest
from pydantic import ValidationError

from greeting_server.exceptions import DuplicateNameError, DuplicateURIError, RegistryError
from greeting_server.registry import CapabilityRegistry
from greeting_server.types.actions import ActionDescriptor, InputSchema
from greeting_server.types.resources import ResourceDescriptor


def _echo(arguments: dict[str, Any]) -> str:
    return arguments.get("message", "")


def _action(name: str) -> ActionDescriptor:
    return ActionDescriptor(
        name=name,
        description=f"{name} action",
        input_schema=InputSchema(properties={"message": {"type": "string"}}),
    )


def _resource(uri: str) -> ResourceDescriptor:
    return ResourceDescriptor(uri=uri, name=uri, description="test resource", mime_type="text/plain")


def test_register_and_fetch_action():
    registry = CapabilityRegistry()
    registry.register_action(_action("echo"), _echo)

    assert registry.get_action_handler("echo") is _echo
    assert registry.get_action("echo") == _action("echo")


def test_register_duplicate_action():
    registry = CapabilityRegistry()
    registry.register_action(_action("echo"), _echo)

    with pytest.raises(DuplicateNameError, match="echo"):
        registry.register_action(_action("echo"), _echo)


def test_register_duplicate_resource():
    registry = CapabilityRegistry()
    registry.register_resource(_resource("test://a"), lambda uri: "a")

    with pytest.raises(DuplicateURIError) as exc_info:
        registry.register_resource(_resource("test://a"), lambda uri: "b")

    assert exc_info.value.uri == "test://a"
    assert isinstance(exc_info.value, RegistryError)


@pytest.mark.parametrize("name", ["unknown", ""])
def test_get_action_handler_missing(name: str):
    registry = CapabilityRegistry()
    assert registry.get_action_handler(name) is None
    assert registry.get_resource_handler(name) is None


def test_listing_keeps_registration_order():
    registry = CapabilityRegistry()
    for name in ["zeta", "alpha", "mid"]:
        registry.register_action(_action(name), _echo)
    for uri in ["test://z", "test://a"]:
        registry.register_resource(_resource(uri), lambda uri: uri)

    assert [action.name for action in registry.list_actions()] == ["zeta", "alpha", "mid"]
    assert [resource.uri for resource in registry.list_resources()] == ["test://z", "test://a"]


def test_every_listed_capability_resolves(registry: CapabilityRegistry):
    for action in registry.list_actions():
        assert registry.get_action_handler(action.name) is not None
    for resource in registry.list_resources():
        assert registry.get_resource_handler(resource.uri) is not None

    names = [action.name for action in registry.list_actions()]
    assert len(names) == len(set(names))


def test_listing_is_idempotent(registry: CapabilityRegistry):
    first = [action.model_dump_json(by_alias=True) for action in registry.list_actions()]
    second = [action.model_dump_json(by_alias=True) for action in registry.list_actions()]
    assert first == second

    first = [resource.model_dump_json(by_alias=True) for resource in registry.list_resources()]
    second = [resource.model_dump_json(by_alias=True) for resource in registry.list_resources()]
    assert first == second


def test_listing_returns_fresh_list(registry: CapabilityRegistry):
    registry.list_actions().clear()
    assert len(registry.list_actions()) == 1


def test_decorators_register_in_place():
    registry = CapabilityRegistry()

    @registry.action(name="shout", description="Upper-cases", input_schema=InputSchema())
    def shout(arguments: dict[str, Any]) -> str:
        return "HI"

    @registry.resource(uri="test://doc", name="Doc", description="A doc")
    def doc(uri: str) -> str:
        return "doc"

    assert registry.get_action_handler("shout") is shout
    assert registry.get_resource_handler("test://doc") is doc
    assert registry.get_resource("test://doc").mime_type == "text/plain"


def test_capabilities_follow_registrations():
    registry = CapabilityRegistry()
    assert registry.capabilities().model_dump(exclude_none=True) == {}

    registry.register_action(_action("echo"), _echo)
    assert registry.capabilities().model_dump(exclude_none=True) == {"actions": {}}

    registry.register_resource(_resource("test://a"), lambda uri: "a")
    assert registry.capabilities().model_dump(exclude_none=True) == {"actions": {}, "resources": {}}


def test_descriptors_are_immutable():
    descriptor = _action("echo")
    with pytest.raises(ValidationError):
        descriptor.name = "other"  # type: ignore[misc]
