import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from openai import AsyncOpenAI

from auction_lint.config import Settings, settings

logger = logging.getLogger(__name__)


class BaseChatService(ABC):
    """One chat-completions round trip against an OpenAI-compatible endpoint."""

    def __init__(self, config: Optional[Settings] = None, api_key: Optional[str] = None):
        self.config = config or settings
        self._api_key = api_key

    @property
    def api_base(self) -> str:
        return self.config.oracle_api_base.rstrip("/")

    @property
    def default_model(self) -> str:
        return self.config.oracle_model

    def _get_api_key(self) -> str:
        api_key = self._api_key or self.config.oracle_api_key
        if not api_key:
            raise ValueError("No oracle API key configured")
        return api_key

    def _build_messages(self, prompt: str, system_prompt: Optional[str] = None) -> list[dict]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    @abstractmethod
    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model_name: Optional[str] = None,
    ) -> tuple[str, int, int, float]:
        """Return (answer, tokens_in, tokens_out, latency)."""


class HttpChatService(BaseChatService):
    def _build_headers(self, api_key: str) -> dict:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, messages: list[dict], model_name: str) -> dict:
        return {
            "model": model_name,
            "messages": messages,
            "temperature": self.config.oracle_temperature,
            "max_tokens": self.config.oracle_max_tokens,
        }

    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model_name: Optional[str] = None,
    ) -> tuple[str, int, int, float]:
        api_key = self._get_api_key()
        model = model_name or self.default_model
        url = f"{self.api_base}/chat/completions"

        payload = self._build_payload(self._build_messages(prompt, system_prompt), model)
        headers = self._build_headers(api_key)

        start_time = time.time()
        async with httpx.AsyncClient(timeout=self.config.oracle_timeout) as client:
            try:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                result = response.json()
                return self._parse_response(result, time.time() - start_time)
            except httpx.HTTPError as e:
                logger.error(f"Oracle HTTP error: {e}")
                raise

    def _parse_response(self, result: dict, latency: float) -> tuple[str, int, int, float]:
        answer = result["choices"][0]["message"]["content"]
        usage = result.get("usage") or {}
        return answer, usage.get("prompt_tokens", 0), usage.get("completion_tokens", 0), latency


class OpenAIChatService(BaseChatService):
    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model_name: Optional[str] = None,
    ) -> tuple[str, int, int, float]:
        api_key = self._get_api_key()
        model = model_name or self.default_model

        client = AsyncOpenAI(
            api_key=api_key,
            base_url=self.api_base,
            timeout=self.config.oracle_timeout,
        )

        request_kwargs = {
            "model": model,
            "messages": self._build_messages(prompt, system_prompt),
            "temperature": self.config.oracle_temperature,
            "max_tokens": self.config.oracle_max_tokens,
        }

        start_time = time.time()
        try:
            response = await client.chat.completions.create(**request_kwargs)
            return self._parse_openai_response(response, time.time() - start_time)
        except Exception as e:
            logger.error(f"Oracle API error: {e}")
            raise

    def _parse_openai_response(self, response, latency: float) -> tuple[str, int, int, float]:
        answer = response.choices[0].message.content or ""
        tokens_in = response.usage.prompt_tokens if response.usage else 0
        tokens_out = response.usage.completion_tokens if response.usage else 0
        return answer, tokens_in, tokens_out, latency


CHAT_SERVICES = {
    "openai": OpenAIChatService,
    "http": HttpChatService,
}


def get_chat_service(config: Optional[Settings] = None) -> BaseChatService:
    config = config or settings
    service_cls = CHAT_SERVICES.get(config.oracle_client.lower())
    if service_cls is None:
        raise ValueError(f"Unknown oracle client: {config.oracle_client}")
    return service_cls(config)
