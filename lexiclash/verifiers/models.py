"""Data models for word verification."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# Pre-check result codes; the presentation layer maps these to localized text
WORD_TOO_SHORT = "WORD_TOO_SHORT"
INVALID_CHARACTERS = "INVALID_CHARACTERS"
ALREADY_FOUND = "ALREADY_FOUND"


class PrecheckResult(BaseModel):
    """Outcome of the optimistic checks run before a word is sent for verification."""
    valid: bool
    code: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)
    should_submit: bool = True
