# docingest/llm/client.py
"""
Retrying text-completion service: the production TextCompletionService.

One provider attempt per try; only LLMRetryableError is retried, with a
short exponential backoff. Every call emits exactly one llm_call log line.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Callable

from docingest.core.config import settings
from docingest.llm.errors import LLMNonRetryableError, LLMRetryableError
from docingest.llm.providers.gemini import GeminiProvider
from docingest.llm.telemetry import LLMCallLog, log_llm_call, now_ms
from docingest.llm.types import LLMRequest, LLMResponse


def backoff_seconds(attempt: int) -> float:
    return min(2.0, 0.25 * (2 ** attempt))


@dataclass
class LLMCompletionService:
    provider: GeminiProvider = field(default_factory=GeminiProvider)
    provider_name: str = "gemini"
    model: str = field(default_factory=lambda: settings.GEMINI_MODEL)
    timeout_seconds: int = field(default_factory=lambda: settings.LLM_TIMEOUT_SECONDS)
    max_retries: int = field(default_factory=lambda: settings.LLM_MAX_RETRIES)
    sleep: Callable[[float], None] = time.sleep

    def complete(
        self,
        system_instruction: str,
        user_content: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        resp = self.generate(
            purpose="completion",
            prompt_name="adhoc",
            prompt_version="v1",
            system_instruction=system_instruction,
            prompt=user_content,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        return resp.output_text

    def generate(
        self,
        *,
        purpose: str,
        prompt_name: str,
        prompt_version: str,
        system_instruction: str,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> LLMResponse:
        trace_id = str(uuid.uuid4())

        req = LLMRequest(
            trace_id=trace_id,
            purpose=purpose,
            prompt_name=prompt_name,
            prompt_version=prompt_version,
            system_instruction=system_instruction,
            provider=self.provider_name,
            model=self.model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            timeout_seconds=self.timeout_seconds,
        )
        prompt_chars = len(system_instruction) + len(prompt) if settings.LLM_LOG_PROMPTS else None

        def _log(ok: bool, retries: int, error_type: str | None = None) -> None:
            log_llm_call(
                LLMCallLog(
                    trace_id=trace_id,
                    provider=req.provider,
                    model=req.model,
                    purpose=purpose,
                    prompt_name=prompt_name,
                    prompt_version=prompt_version,
                    latency_ms=(now_ms() - start_ms),
                    retries=retries,
                    ok=ok,
                    error_type=error_type,
                    prompt_chars=prompt_chars,
                )
            )

        start_ms = now_ms()
        retries = 0
        last_err: Exception | None = None

        for attempt in range(self.max_retries + 1):
            try:
                resp = self.provider.generate(req, prompt)
            except LLMRetryableError as e:
                last_err = e
                retries += 1

                if attempt >= self.max_retries:
                    break

                self.sleep(backoff_seconds(attempt))
                continue
            except LLMNonRetryableError as e:
                _log(False, retries, type(e).__name__)
                raise

            _log(True, retries)
            return LLMResponse(
                trace_id=resp.trace_id,
                provider=resp.provider,
                model=resp.model,
                output_text=resp.output_text,
                latency_ms=resp.latency_ms,
                retries=retries,
                raw=resp.raw,
                input_tokens=resp.input_tokens,
                output_tokens=resp.output_tokens,
            )

        _log(False, retries, type(last_err).__name__ if last_err else "LLMError")
        raise last_err if last_err else LLMRetryableError("LLM failed after retries")


def build_completion_service() -> LLMCompletionService:
    """Construct the configured completion service (composition root only)."""
    if settings.LLM_PROVIDER != "gemini":
        raise LLMNonRetryableError(f"Unsupported provider: {settings.LLM_PROVIDER}")
    return LLMCompletionService()
