"""Base types shared by the protocol payload models."""

from typing import Final

from pydantic import BaseModel, ConfigDict

LATEST_PROTOCOL_VERSION: Final[str] = "2024-11-05"


class ProtocolModel(BaseModel):
    """Base class for all payload types. Allows extra fields for forward compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Descriptor(ProtocolModel):
    """Base class for advertised capability descriptors. Immutable once built."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class RequestParams(ProtocolModel):
    """Base class for request parameters."""


class Result(ProtocolModel):
    """Base class for results."""
