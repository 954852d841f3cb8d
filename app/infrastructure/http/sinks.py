"""Response sinks decoupling response formatting from the web framework.

A sink receives a status code and exactly one body, and hands back the
finalized framework response.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class ResponseAlreadySentError(RuntimeError):
    """Raised when a body is written to a sink that already produced a response."""


@runtime_checkable
class ResponseSink(Protocol):
    """Minimal response capability used by the response formatters."""

    def set_status(self, status_code: int) -> None: ...

    def write_json(self, body: Any) -> Any: ...

    def write_text(self, body: str) -> Any: ...


class StarletteResponseSink:
    """ResponseSink producing FastAPI/Starlette responses.

    Attributes:
        status_code: Status applied to the response, 200 until set.
        response: The finalized response, None until a body is written.
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.response: Optional[Response] = None

    def set_status(self, status_code: int) -> None:
        self._ensure_open()
        self.status_code = status_code

    def write_json(self, body: Any) -> JSONResponse:
        self._ensure_open()
        response = JSONResponse(
            content=jsonable_encoder(body), status_code=self.status_code
        )
        self.response = response
        return response

    def write_text(self, body: str) -> PlainTextResponse:
        self._ensure_open()
        response = PlainTextResponse(
            content="" if body is None else str(body), status_code=self.status_code
        )
        self.response = response
        return response

    def _ensure_open(self) -> None:
        if self.response is not None:
            raise ResponseAlreadySentError("Response already written to this sink")
