"""Pydantic models for generateContent request/response bodies."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str

class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: list[Part]

class GenerateContentRequest(BaseModel):
    contents: list[Content]

    @classmethod
    def from_text(cls, text: str) -> "GenerateContentRequest":
        """Wrap one user string as a single content block with one text part."""
        return cls(contents=[Content(parts=[Part(text=text)])])

def first_candidate_text(data: dict[str, Any]) -> str:
    """
    Text of ``candidates[0].content.parts[0]``, unmodified.

    Only that part is validated; later candidates (e.g. safety-blocked ones)
    and later parts (e.g. ``functionCall``) may have any shape.

    Raises:
        KeyError, IndexError, TypeError: a step of the path is missing.
        ValidationError: the first part carries no string ``text``.
    """
    part = data["candidates"][0]["content"]["parts"][0]
    return Part.model_validate(part).text

class ApiError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    code: int

class ErrorEnvelope(BaseModel):
    """Failure shape: ``{"error": {"message": ..., "code": ...}}``."""
    model_config = ConfigDict(extra="ignore")

    error: ApiError
