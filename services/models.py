# /services/models.py
# Plain data types passed between the GitHub client, the summarizer and the pipeline.
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from settings import settings


@dataclass(frozen=True)
class PullRequestLocator:
    owner: str
    repository: str
    reference_number: str


@dataclass
class ChangedFile:
    path: str
    patch: Optional[str]  # None for binary or rename-only files
    status: str = ""
    additions: int = 0
    deletions: int = 0

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "ChangedFile":
        return cls(
            path=item.get("filename") or "",
            patch=item.get("patch"),
            status=item.get("status") or "",
            additions=item.get("additions") or 0,
            deletions=item.get("deletions") or 0,
        )


class ModelChoice(str, Enum):
    FAST = "fast"
    ADVANCED = "advanced"

    @property
    def model_name(self) -> str:
        if self is ModelChoice.ADVANCED:
            return settings.model_advanced
        return settings.model_fast


class PipelineState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    SUMMARIZING = "summarizing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineRequest:
    locator: PullRequestLocator
    api_key: str
    model: ModelChoice = ModelChoice.FAST


@dataclass
class PipelineResult:
    output: str
    state: PipelineState
    summaries: List[str] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.state is PipelineState.DONE
