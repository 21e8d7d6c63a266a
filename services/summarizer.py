# /services/summarizer.py
# This module defines the PatchSummarizer class, which turns the patch of one changed file into
# a single "Keep a Changelog" style sentence.
from __future__ import annotations

from typing import Dict, List

from services.llm_client import OpenAILLMClient
from utils.errors import CompletionError


SYSTEM_PROMPT = " ".join([
    "You are a senior software engineer.",
    "You need to summarize this git diff in a concise manner, no more than a short sentence.",
    "You need to write the summary in present tense.",
    "You need to phrase it like a \"Keep a Changelog\" entry.",
    "Provide back only the summary, nothing before and nothing after.",
])


class PatchSummarizer:
    def __init__(self, llm: OpenAILLMClient) -> None:
        self.llm = llm

    def _build_prompt(self, patch: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": patch},
        ]

    async def summarize(self, api_key: str, model: str, patch: str) -> str:
        # deterministic sampling, exactly one candidate
        choices = await self.llm.chat(
            api_key=api_key,
            model=model,
            messages=self._build_prompt(patch),
            temperature=0,
            top_p=1,
            n=1,
        )
        if not choices:
            raise CompletionError(502, "OpenAI API Error: the completion returned no choices")
        # the model output is trusted as-is
        return choices[0]
