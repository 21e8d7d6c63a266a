# /services/github_client.py
# This module defines a GitHubClient class that resolves pull requests to their merge commit
# and lists the files changed by that commit.
import logging
from typing import Any, Dict, List, Optional
import httpx

from settings import settings
from services.models import ChangedFile, PullRequestLocator
from utils.errors import fetch_error, resolution_error

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "pr-changelog-summarizer/0.1",
        }
        token = token or settings.github_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        kwargs: Dict[str, Any] = {}
        if settings.http_timeout_s is not None:
            kwargs["timeout"] = httpx.Timeout(settings.http_timeout_s)

        self._client = httpx.AsyncClient(
            base_url=base_url or settings.github_api_base,
            headers=headers,
            transport=transport,
            **kwargs,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def resolve_merge_commit(self, locator: PullRequestLocator) -> str:
        path = f"/repos/{locator.owner}/{locator.repository}/pulls/{locator.reference_number}"
        try:
            r = await self._client.get(path)
        except httpx.HTTPError as e:
            raise resolution_error(f"GitHub pull request lookup failed: {e}") from e
        if r.status_code >= 400:
            raise resolution_error(f"GitHub pull request lookup failed: {r.status_code} {r.text}")

        try:
            data = r.json()
        except ValueError as e:
            raise resolution_error("GitHub pull request lookup returned an unreadable response") from e

        sha = data.get("merge_commit_sha") if isinstance(data, dict) else None
        if not sha:
            raise resolution_error(
                f"Pull request {locator.owner}/{locator.repository}#{locator.reference_number} "
                "has no merge commit (is it merged?)"
            )
        logger.debug("Resolved %s/%s#%s to %s", locator.owner, locator.repository, locator.reference_number, sha)
        return sha

    async def fetch_files(self, locator: PullRequestLocator, commit: str) -> List[ChangedFile]:
        path = f"/repos/{locator.owner}/{locator.repository}/commits/{commit}"
        try:
            r = await self._client.get(path)
        except httpx.HTTPError as e:
            raise fetch_error(f"GitHub commit lookup failed: {e}") from e
        if r.status_code >= 400:
            raise fetch_error(f"GitHub commit lookup failed: {r.status_code} {r.text}")

        try:
            data = r.json()
        except ValueError as e:
            raise fetch_error("GitHub commit lookup returned an unreadable response") from e

        files = data.get("files") if isinstance(data, dict) else None
        if not isinstance(files, list):
            raise fetch_error(f"GitHub commit {commit} has no file list")
        if not all(isinstance(item, dict) for item in files):
            raise fetch_error(f"GitHub commit {commit} has a malformed file list")
        return [ChangedFile.from_api(item) for item in files]
