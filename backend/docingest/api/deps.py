"""
deps.py
- Purpose: Composition root for the extraction pipeline.
- Design: The completion service (and its lazily-built SDK client) is created
  once per process and shared; routes receive it via Depends so tests can
  override it with app.dependency_overrides.
"""

import logging
from functools import lru_cache

from docingest.extraction.orchestrator import ExtractionOrchestrator
from docingest.llm.client import LLMCompletionService, build_completion_service
from docingest.llm.errors import LLMError

logger = logging.getLogger("docingest.deps")


@lru_cache(maxsize=1)
def get_completion_service() -> LLMCompletionService | None:
    """
    Returns None when the configured provider can't be built; AI strategies
    then fall back to basic cleanup.
    """
    try:
        return build_completion_service()
    except LLMError as e:
        logger.warning("llm.unavailable", extra={"error": str(e)})
        return None


@lru_cache(maxsize=1)
def get_orchestrator() -> ExtractionOrchestrator:
    return ExtractionOrchestrator(completion_service=get_completion_service())
