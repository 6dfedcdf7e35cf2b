"""
Common DTOs
===========

Envelope and small response shapes shared by all controllers.
"""
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

DataType = TypeVar("DataType")


class ResultResponse(BaseModel, Generic[DataType]):
    """JSON shape of a Result."""
    is_success: bool
    message: str
    data: Optional[DataType] = None
    errors: List[str] = Field(default_factory=list)


class ExistsResponse(BaseModel):
    """Answer of the check-email / check-cpf / check-name endpoints."""
    exists: bool
    message: str


class ProblemDetails(BaseModel):
    """Body returned for unhandled server errors."""
    status: int
    title: str
    detail: str
    instance: str


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: datetime


class DatabaseHealthResponse(BaseModel):
    status: str
    database: str
    message: str
