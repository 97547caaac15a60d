"""
Models / server.py
Role:
- Static network topology returned by GET /servers/list (proxy + hubs).
"""
from typing import List

from pydantic import BaseModel, Field


class Server(BaseModel):
    name: str
    port: int = Field(..., ge=1, le=65535)


class ServersResponse(BaseModel):
    proxy: Server
    hubs: List[Server] = Field(default_factory=list)
