"""
llm_service.py

单轮 LLM 调用，经由 LiteLLM（默认 Gemini）。

依赖：
    pip install litellm
"""

from __future__ import annotations

from typing import Optional

from litellm import completion

from paperpilot.config import Settings


class LLMService:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        temperature: float = 0.2,
        timeout: int = 60,
    ):
        self.model = model
        self.api_key = api_key
        self.api_base = api_base
        self.temperature = temperature
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMService":
        cfg = settings.chat_litellm
        return cls(
            model=cfg.model,
            api_key=cfg.api_key,
            api_base=cfg.api_base,
            temperature=cfg.temperature,
            timeout=cfg.timeout,
        )

    def to_litellm_params(self) -> dict:
        params = {
            "model": self.model,
            "temperature": self.temperature,
            "timeout": self.timeout,
        }

        if self.api_key:
            params["api_key"] = self.api_key

        if self.api_base:
            params["api_base"] = self.api_base

        return params

    def completion(self, prompt: str) -> str:
        """单轮对话"""
        resp = completion(
            messages=[{"role": "user", "content": prompt}],
            **self.to_litellm_params(),
        )
        return resp.choices[0].message.content
