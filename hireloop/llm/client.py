# -*- coding: utf-8 -*-
import json
import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from hireloop.config import LLMConfig
from hireloop.core.serialization import load_llm_json

logger = logging.getLogger("hireloop.llm")

_MISSING = object()


class LLMError(RuntimeError):
    """The completion request itself failed (auth, network, quota, timeout)."""


class LLMResponseError(LLMError):
    """The model answered, but not with a JSON object we can use."""


class LLMClient:
    """
    Thin wrapper over chat completions in JSON mode.

    The SDK client is built on first use so the app (and the test-suite)
    can import without an API key configured.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key if api_key is not None else LLMConfig.API_KEY
        self.model = model or LLMConfig.MODEL
        self.timeout = timeout if timeout is not None else LLMConfig.TIMEOUT
        self._client: Optional[AsyncOpenAI] = None

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise LLMError("OpenAI API key not configured")
            kwargs: Dict[str, Any] = {"api_key": self.api_key, "max_retries": 0}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def complete_json(
        self,
        system: str,
        user: str,
        temperature: Optional[float] = None,
        default: Any = _MISSING,
    ) -> Any:
        """
        Sends one system + user turn and returns the decoded JSON reply.

        If `default` is given, a malformed reply is logged and `default` is
        returned instead of raising LLMResponseError. Transport failures
        always raise LLMError.
        """
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "response_format": {"type": "json_object"},
        }
        if temperature is not None:
            params["temperature"] = temperature

        try:
            completion = await self._get_client().chat.completions.create(**params)
        except OpenAIError as e:
            logger.error(f"LLM request failed: {e}")
            raise LLMError(str(e)) from e

        content = completion.choices[0].message.content if completion.choices else None

        try:
            return load_llm_json(content)
        except json.JSONDecodeError as e:
            if default is not _MISSING:
                logger.warning(f"LLM returned malformed JSON, using default: {e}")
                return default
            raise LLMResponseError(f"Malformed JSON from model: {e}") from e


# Global instance
llm_client = LLMClient()
