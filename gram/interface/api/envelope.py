"""Uniform response envelope for mutations and errors."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class SuccessEnvelope(BaseModel, Generic[DataT]):
    """Successful result: {"success": true, "data": ...}."""

    success: Literal[True] = True
    data: DataT


class ErrorEnvelope(BaseModel):
    """Failed result: {"success": false, "message": ...}.

    The message is always safe to show to end users.
    """

    success: Literal[False] = False
    message: str
