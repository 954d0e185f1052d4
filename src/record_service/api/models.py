"""Pydantic models for request payloads."""

from typing import Any

from pydantic import BaseModel


class UserPayload(BaseModel):
    """Body of create and update requests; fields are passed through as sent."""

    name: Any = None
    email: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "UserPayload":
        """Read name and email from a raw body; anything but an object is empty."""
        if isinstance(body, dict):
            return cls.model_validate(body)
        return cls()
