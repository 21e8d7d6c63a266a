# /api/schemas.py
# This module defines the request and response schemas for the PR Changelog Summarizer API, as well as a
# standard error response format.
from pydantic import BaseModel, Field
from typing import Literal, Optional

from services.models import ModelChoice


class SummarizeRequest(BaseModel):
    owner: str = Field(..., min_length=1, description="User or organisation owning the repository")
    repo: str = Field(..., min_length=1, description="Repository name")
    reference: str = Field(..., min_length=1, description="Pull request number")
    api_key: Optional[str] = Field(default=None, description="OpenAI API key; falls back to the stored one")
    model: ModelChoice = ModelChoice.FAST


class SummarizeResponse(BaseModel):
    status: Literal["ok", "error"]
    output: str


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
