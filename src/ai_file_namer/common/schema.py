"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

@dataclass(frozen=True)
class GenerationRequest:
    """One call's worth of input for the generation provider."""
    model_id: str
    system_instruction: str
    description: str
    temperature: float
    response_schema: dict[str, Any] = field(default_factory=dict)
    response_mime_type: str = "application/json"

class SuggestionOut(BaseModel):
    success: bool = True
    names: list[Any]

class ErrorOut(BaseModel):
    success: bool = False
    error: str
