"""docingest/extraction/enhance.py

Language-model extraction: send a bounded excerpt of raw text plus a
task-specific prompt to the completion collaborator, then scrub the reply.

Never raises. Any collaborator failure comes back as an EnhancementOutcome
with `error` set so the orchestrator can fall back to basic cleanup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from docingest.extraction.cleaning import sanitize_model_output
from docingest.extraction.types import EnhanceMode, EnhancementOutcome
from docingest.llm.prompts.registry import get_prompt
from docingest.llm.types import TextCompletionService

logger = logging.getLogger("docingest.extraction")

TEMPERATURE = 0.1

UNAVAILABLE = "language model unavailable"
EMPTY_REPLY = "language model returned no usable text"


@dataclass(frozen=True)
class ModeProfile:
    prompt_name: str
    prompt_version: str
    char_budget: int
    truncation_marker: str
    max_output_tokens: int


MODE_PROFILES: dict[EnhanceMode, ModeProfile] = {
    EnhanceMode.ENHANCE: ModeProfile(
        prompt_name="enhance_text",
        prompt_version="v1",
        char_budget=8000,
        truncation_marker="\n\n[Content truncated for processing]",
        max_output_tokens=2000,
    ),
    EnhanceMode.RECONSTRUCT: ModeProfile(
        prompt_name="reconstruct_scanned",
        prompt_version="v1",
        char_budget=6000,
        truncation_marker="\n\n[Content truncated]",
        max_output_tokens=3000,
    ),
}


def bounded_excerpt(content: str, profile: ModeProfile) -> str:
    if len(content) <= profile.char_budget:
        return content
    return content[: profile.char_budget] + profile.truncation_marker


class LanguageModelExtractor:
    def __init__(self, service: TextCompletionService | None):
        self.service = service

    def enhance(self, content: str, mode: EnhanceMode) -> EnhancementOutcome:
        if self.service is None:
            return EnhancementOutcome(text=None, error=UNAVAILABLE)

        profile = MODE_PROFILES[mode]
        prompt = get_prompt(profile.prompt_name, profile.prompt_version)
        user_content = prompt.render({"content": bounded_excerpt(content, profile)})

        try:
            reply = self.service.complete(
                prompt.system_instruction,
                user_content,
                TEMPERATURE,
                profile.max_output_tokens,
            )
        except Exception as e:
            logger.warning(
                "extraction.enhance_failed",
                extra={"mode": mode.value, "error_type": type(e).__name__, "error": str(e)},
            )
            return EnhancementOutcome(text=None, error=str(e) or type(e).__name__)

        text = sanitize_model_output(reply)
        if not text:
            logger.warning("extraction.enhance_empty", extra={"mode": mode.value})
            return EnhancementOutcome(text=None, error=EMPTY_REPLY)

        return EnhancementOutcome(text=text)
