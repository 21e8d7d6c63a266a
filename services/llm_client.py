# /services/llm_client.py
# This module defines an OpenAILLMClient class that sends chat completion requests on behalf of
# the caller, using the API key supplied with each request.
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from settings import settings
from utils.errors import CompletionError, completion_error

logger = logging.getLogger(__name__)


class OpenAILLMClient:
    """
    The API key belongs to the user, not to the deployment, so a fresh AsyncOpenAI
    is bound to the key on every call. All of them share one httpx.AsyncClient.
    SDK retries are disabled: one request per call, failures surface immediately.
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url or settings.openai_base_url
        self._http = http_client or httpx.AsyncClient()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _client_for(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url,
            max_retries=0,
            http_client=self._http,
        )

    async def chat(
        self,
        api_key: str,
        model: str,
        messages: List[Dict[str, str]],
        temperature: float = 0,
        top_p: float = 1,
        n: int = 1,
    ) -> List[str]:
        """Return the message content of every completion choice, in order."""
        client = self._client_for(api_key)
        try:
            resp = await client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                top_p=top_p,
                n=n,
            )
        except APIStatusError as e:
            logger.warning("Completion request failed with HTTP %s", e.status_code)
            raise completion_error(e.status_code, e.response.reason_phrase, e.body) from e
        except APIConnectionError as e:
            raise CompletionError(502, f"OpenAI API Error: {e}") from e

        return [(choice.message.content or "") for choice in resp.choices or []]
