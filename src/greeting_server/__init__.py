from greeting_server.dispatcher import Dispatcher
from greeting_server.exceptions import DuplicateNameError, DuplicateURIError, GreetingServerError, RegistryError
from greeting_server.registry import CapabilityRegistry
from greeting_server.server import build_server
from greeting_server.session import ServerSession

__all__ = [
    "CapabilityRegistry",
    "Dispatcher",
    "DuplicateNameError",
    "DuplicateURIError",
    "GreetingServerError",
    "RegistryError",
    "ServerSession",
    "build_server",
]
