"""Health-check response contract."""

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str
    version: str
