"""Response envelope shared by the introduction routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Wraps a verdict, greeting, stats or run listing under ``data``."""

    data: DataT
