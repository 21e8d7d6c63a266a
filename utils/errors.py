# /utils/errors.py
# Error types raised by the summarization pipeline and the request handlers.
from dataclasses import dataclass
from typing import Any
import json


STATUS_PAGE_HINT = "Check the API status: https://status.openai.com"


@dataclass
class AppError(Exception):
    status_code: int
    message: str


class ResolutionError(AppError):
    """The pull request could not be resolved to a merge commit."""


class FetchError(AppError):
    """The changed files of the merge commit could not be retrieved."""


@dataclass
class CompletionError(AppError):
    upstream_status: int | None = None
    status_text: str = ""
    body: Any = None


def bad_request(msg: str) -> AppError:
    return AppError(400, msg)


def resolution_error(msg: str) -> ResolutionError:
    return ResolutionError(502, msg)


def fetch_error(msg: str) -> FetchError:
    return FetchError(502, msg)


def _format_body(body: Any) -> str:
    if isinstance(body, (dict, list)):
        return json.dumps(body)
    return str(body)


def completion_error(status: int, status_text: str, body: Any = None) -> CompletionError:
    msg = f"OpenAI API Error: {status} - {status_text}"
    if body:
        msg += f"\n\n{_format_body(body)}"
    if status == 500:
        msg += f"\n\n{STATUS_PAGE_HINT}"
    return CompletionError(502, msg, upstream_status=status, status_text=status_text, body=body)
