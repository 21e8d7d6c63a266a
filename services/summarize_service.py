# /services/summarize_service.py
# This module defines the SummarizeService class, which orchestrates the summary of a merged
# pull request: resolve the merge commit, list its files, summarize each patch, join the lines.
from __future__ import annotations

import logging
from typing import List

from services.github_client import GitHubClient
from services.llm_client import OpenAILLMClient
from services.models import ChangedFile, PipelineRequest, PipelineResult, PipelineState
from services.summarizer import PatchSummarizer
from utils.errors import AppError

logger = logging.getLogger(__name__)


def render_report(summaries: List[str]) -> str:
    return "\n".join(f"- {line}" for line in summaries)


class SummarizeService:
    def __init__(self, github: GitHubClient, llm: OpenAILLMClient) -> None:
        self.github = github
        self.llm = llm
        self.summarizer = PatchSummarizer(llm)

    @staticmethod
    def _enter(current: PipelineState, new: PipelineState) -> PipelineState:
        logger.debug("Pipeline %s -> %s", current.value, new.value)
        return new

    async def _summarize_files(self, request: PipelineRequest, files: List[ChangedFile]) -> List[str]:
        model = request.model.model_name
        summaries: List[str] = []
        for i, f in enumerate(files):
            if f.patch is None:
                # binary or rename-only change, nothing to describe
                logger.info("Skipping %s: no patch", f.path)
                continue
            logger.info("Summarizing file %d/%d: %s", i + 1, len(files), f.path)
            summaries.append(await self.summarizer.summarize(request.api_key, model, f.patch))
        return summaries

    async def run(self, request: PipelineRequest) -> PipelineResult:
        """
        Run the whole pipeline once. Never raises: a failure in any step aborts the run
        and its message becomes the output, with no partial report.
        The pipeline state is local to the call.
        """
        loc = request.locator
        state = PipelineState.IDLE
        try:
            state = self._enter(state, PipelineState.RESOLVING)
            commit = await self.github.resolve_merge_commit(loc)

            state = self._enter(state, PipelineState.FETCHING)
            files = await self.github.fetch_files(loc, commit)

            state = self._enter(state, PipelineState.SUMMARIZING)
            summaries = await self._summarize_files(request, files)
        except AppError as e:
            logger.warning("Summary of %s/%s#%s failed in %s: %s",
                           loc.owner, loc.repository, loc.reference_number, state.value, e.message)
            state = self._enter(state, PipelineState.FAILED)
            return PipelineResult(output=e.message, state=state, error=e)
        except Exception as e:
            logger.exception("Unexpected error while summarizing %s/%s#%s in %s",
                             loc.owner, loc.repository, loc.reference_number, state.value)
            state = self._enter(state, PipelineState.FAILED)
            return PipelineResult(output=f"Unexpected error: {e}", state=state, error=e)

        state = self._enter(state, PipelineState.DONE)
        return PipelineResult(output=render_report(summaries), state=state, summaries=summaries)
