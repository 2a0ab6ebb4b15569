"""Response envelope shared by every endpoint."""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, model_serializer

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """``{status, message, data?, errors?}`` wrapper."""

    status: Literal["success", "error"] = "success"
    message: str | None = None
    data: DataT | None = None
    errors: dict[str, list[str]] | None = None

    @model_serializer(mode="wrap")
    def _drop_empty_keys(self, handler):
        body = handler(self)
        return {key: value for key, value in body.items() if value is not None}


def success(data: Any = None, message: str | None = None) -> dict[str, Any]:
    """Build a success envelope, dropping empty keys."""
    body: dict[str, Any] = {"status": "success"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def error(
    message: str,
    errors: dict[str, list[str]] | None = None,
    detail: str | None = None,
) -> dict[str, Any]:
    """Build an error envelope."""
    body: dict[str, Any] = {"status": "error", "message": message}
    if errors:
        body["errors"] = errors
    if detail:
        body["error"] = detail
    return body
