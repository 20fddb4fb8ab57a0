from greeting_server.transport.stdio import run_stdio

__all__ = ["run_stdio"]
