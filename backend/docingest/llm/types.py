# docingest/llm/types.py
from dataclasses import dataclass
from typing import Any, Protocol

JsonDict = dict[str, Any]

@dataclass(frozen=True)
class LLMRequest:
    trace_id: str
    purpose: str                    # e.g. "enhance_text", "reconstruct_scanned"
    prompt_name: str                # registry key
    prompt_version: str             # e.g. "v1"
    system_instruction: str

    provider: str                   # "gemini"
    model: str                      # e.g. "gemini-1.5-flash"

    temperature: float
    max_output_tokens: int
    timeout_seconds: int

@dataclass(frozen=True)
class LLMResponse:
    trace_id: str
    provider: str
    model: str
    output_text: str

    # Optional metadata (provider-dependent)
    latency_ms: int
    retries: int
    raw: JsonDict | None = None
    input_tokens: int | None = None
    output_tokens: int | None = None


class TextCompletionService(Protocol):
    """The one collaborator the extraction pipeline talks to.

    Implementations may raise any exception; callers treat all failures alike.
    """

    def complete(
        self,
        system_instruction: str,
        user_content: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str: ...
