"""Custom exceptions for the greeting server."""


class GreetingServerError(Exception):
    """Base error for the greeting server."""


class RegistryError(GreetingServerError):
    """Error in registering a capability."""


class DuplicateNameError(RegistryError):
    """An action with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Action already exists: {name}")
        self.name = name


class DuplicateURIError(RegistryError):
    """A resource with the same URI is already registered."""

    def __init__(self, uri: str):
        super().__init__(f"Resource already exists: {uri}")
        self.uri = uri
