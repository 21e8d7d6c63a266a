import json
from typing import Any, Dict, List, Tuple, Union

import httpx
import pytest

from services.github_client import GitHubClient
from services.llm_client import OpenAILLMClient
from services.models import ModelChoice, PipelineRequest, PullRequestLocator
from services.summarize_service import SummarizeService

GITHUB_BASE = "https://api.github.test"
LLM_BASE = "https://llm.test/v1"

PR_PATH = "/repos/acme/widget/pulls/42"
COMMIT_PATH = "/repos/acme/widget/commits/abc123"


def completion_body(*contents: str) -> Dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": i,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
            for i, content in enumerate(contents)
        ],
    }


def changed_file(name: str, patch: Union[str, None] = None, status: str = "modified") -> Dict[str, Any]:
    item: Dict[str, Any] = {"filename": name, "status": status, "additions": 1, "deletions": 0}
    if patch is not None:
        item["patch"] = patch
    return item


class FakeGitHub:
    """Routes GitHub requests by path; values are (status, json) or an exception to raise."""

    def __init__(self, routes: Dict[str, Any]) -> None:
        self.routes = routes
        self.calls: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.path)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)


class FakeLLM:
    """Answers chat completions from a list of replies, cycling when exhausted.

    A reply is either the completion text or a (status, json-or-None) tuple.
    """

    def __init__(self, replies: List[Union[str, Tuple[int, Any]]]) -> None:
        self.replies = replies
        self.requests: List[Dict[str, Any]] = []
        self.headers: List[httpx.Headers] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        self.headers.append(request.headers)
        reply = self.replies[(len(self.requests) - 1) % len(self.replies)]
        if isinstance(reply, str):
            return httpx.Response(200, json=completion_body(reply))
        status, body = reply
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)


def scenario_routes(files=None) -> Dict[str, Any]:
    if files is None:
        files = [changed_file("a.ts", "diff-a"), changed_file("b.ts", "diff-b")]
    return {
        PR_PATH: (200, {"number": 42, "merged": True, "merge_commit_sha": "abc123"}),
        COMMIT_PATH: (200, {"sha": "abc123", "files": files}),
    }


def make_github(fake: FakeGitHub) -> GitHubClient:
    return GitHubClient(base_url=GITHUB_BASE, token="", transport=httpx.MockTransport(fake))


def make_llm(fake: FakeLLM) -> OpenAILLMClient:
    return OpenAILLMClient(base_url=LLM_BASE, http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake)))


@pytest.fixture
def locator() -> PullRequestLocator:
    return PullRequestLocator(owner="acme", repository="widget", reference_number="42")


@pytest.fixture
def pipeline_request(locator) -> PipelineRequest:
    return PipelineRequest(locator=locator, api_key="sk-test", model=ModelChoice.FAST)


@pytest.fixture
def make_service():
    def _make(github_routes: Dict[str, Any], llm_replies: List[Union[str, Tuple[int, Any]]]):
        gh = FakeGitHub(github_routes)
        llm = FakeLLM(llm_replies)
        return SummarizeService(github=make_github(gh), llm=make_llm(llm)), gh, llm
    return _make
