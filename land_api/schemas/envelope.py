"""
Response envelopes shared by every contract-backed route.
"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessEnvelope(BaseModel, Generic[DataT]):
    success: bool = Field(True, examples=[True])
    data: DataT
    message: str = Field(examples=["Operation completed successfully"])
    timestamp: str = Field(examples=["2024-01-15T10:30:00.000Z"])
    warning: Optional[str] = None


class ErrorDetail(BaseModel):
    message: str = Field(examples=["Operation failed"])
    details: str = Field(examples=["execution reverted: not authorized"])
    code: str = Field(examples=["OPERATION_ERROR"])
    timestamp: str = Field(examples=["2024-01-15T10:30:00.000Z"])
    endpoint: str = Field(examples=["/api/getter/get-treasury"])
    note: Optional[str] = None


class ErrorEnvelope(BaseModel):
    success: bool = Field(False, examples=[False])
    error: ErrorDetail
