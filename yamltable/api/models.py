"""Request and response bodies for the HTTP API."""

from pydantic import BaseModel


class YamlOption(BaseModel):
    """Text to render."""

    text: str = ""


class ErrorResponse(BaseModel):
    """Body returned for documents that cannot be rendered."""

    message: str
    error: str


class Health(BaseModel):
    status: str
    version: str
