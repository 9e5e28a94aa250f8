"""Operational endpoint schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    service: str


class ApiInfoResponse(BaseModel):
    name: str
    version: str
    docs: str
