"""Server assembly - builds the registry, dispatcher and session from settings."""

from __future__ import annotations

from greeting_server.config import Settings
from greeting_server.dispatcher import Dispatcher
from greeting_server.greetings import register_greetings
from greeting_server.registry import CapabilityRegistry
from greeting_server.session import ServerSession
from greeting_server.types.initialize import Implementation


def build_server(settings: Settings | None = None) -> ServerSession:
    """Construct a ready-to-run session with the greeting capabilities registered."""
    settings = settings or Settings()

    registry = CapabilityRegistry()
    register_greetings(registry)

    dispatcher = Dispatcher(registry, strict_enums=settings.strict_enums)
    return ServerSession(
        dispatcher,
        server_info=Implementation(name=settings.server_name, version=settings.server_version),
    )
