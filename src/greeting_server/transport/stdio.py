"""Stdio Transport - Run a ServerSession over stdin/stdout.

Messages are newline-delimited JSON-RPC. Each line is decoded, handled and
answered before the next one is read, so responses leave in request order.
"""

from __future__ import annotations

import json
import sys
from io import TextIOWrapper
from typing import BinaryIO

import anyio
from pydantic import ValidationError

from greeting_server.session import ServerSession
from greeting_server.types.json_rpc import (
    ErrorCode,
    ErrorData,
    JSONRPCErrorResponse,
    JSONRPCMessageAdapter,
    JSONRPCNotification,
    JSONRPCResponse,
)
from greeting_server.utilities.logging import get_logger

logger = get_logger(__name__)


class _NonClosingTextIOWrapper(TextIOWrapper):
    """Text wrapper that never closes the underlying binary stream."""

    def close(self) -> None:
        if self.closed:
            return
        if self.writable():
            self.flush()


def _wrap_process_stdio(binary_stream: BinaryIO) -> anyio.AsyncFile[str]:
    return anyio.wrap_file(_NonClosingTextIOWrapper(binary_stream, encoding="utf-8", errors="replace"))


def decode_error(exc: ValidationError) -> JSONRPCErrorResponse:
    """Build the error response for a line that is not a valid JSON-RPC message."""
    if any(error["type"] == "json_invalid" for error in exc.errors()):
        return JSONRPCErrorResponse(id=None, error=ErrorData(code=ErrorCode.PARSE_ERROR, message="Parse error"))
    return _invalid_request()


def _invalid_request() -> JSONRPCErrorResponse:
    return JSONRPCErrorResponse(id=None, error=ErrorData(code=ErrorCode.INVALID_REQUEST, message="Invalid Request"))


def encode_response(response: JSONRPCResponse) -> str:
    data = response.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(response, JSONRPCErrorResponse):
        # Errors for undecodable lines still carry an explicit null id
        data.setdefault("id", None)
    return json.dumps(data, ensure_ascii=False)


async def run_stdio(
    session: ServerSession,
    *,
    stdin: anyio.AsyncFile[str] | None = None,
    stdout: anyio.AsyncFile[str] | None = None,
) -> None:
    """Serve ``session`` until stdin is exhausted."""
    # The process' real stdin/stdout are re-wrapped as UTF-8 and left open on exit
    if not stdin:
        stdin = _wrap_process_stdio(sys.stdin.buffer)
    if not stdout:
        stdout = _wrap_process_stdio(sys.stdout.buffer)

    async def write(response: JSONRPCResponse) -> None:
        await stdout.write(encode_response(response) + "\n")
        await stdout.flush()

    async for raw_line in stdin:
        line = raw_line.strip()
        if not line:
            continue

        try:
            message = JSONRPCMessageAdapter.validate_json(line)
        except ValidationError as exc:
            logger.warning("Rejecting malformed message: %s", line[:200])
            await write(decode_error(exc))
            continue

        if isinstance(message, JSONRPCNotification) and "id" in (message.model_extra or {}):
            # An id that is neither an integer nor a string, e.g. 1.5 or true
            logger.warning("Rejecting request with invalid id: %s", line[:200])
            await write(_invalid_request())
            continue

        response = session.handle_message(message)
        if response is not None:
            await write(response)

    logger.info("stdin closed, shutting down")
