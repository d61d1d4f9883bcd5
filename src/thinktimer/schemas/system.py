"""Payloads for the OS integration endpoints."""

from pydantic import BaseModel


class OpenDirectoryRequest(BaseModel):
    path: str


class OpenUrlRequest(BaseModel):
    url: str
