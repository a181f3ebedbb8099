# docingest/routers/llm_health.py
from fastapi import APIRouter, Depends, status

from docingest.api.deps import get_completion_service
from docingest.core import AppError, ErrorCode, ErrorReason
from docingest.llm.client import LLMCompletionService
from docingest.llm.errors import LLMError
from docingest.llm.prompts.registry import get_prompt

router = APIRouter(prefix="/api/llm", tags=["llm"])

@router.get("/health")
def llm_health(service: LLMCompletionService | None = Depends(get_completion_service)):
    if service is None:
        return {"ok": False, "error": "language model unavailable"}

    prompt = get_prompt("healthcheck", "v1")
    try:
        resp = service.generate(
            purpose="healthcheck",
            prompt_name=prompt.name,
            prompt_version=prompt.version,
            system_instruction=prompt.system_instruction,
            prompt=prompt.render({}),
            temperature=0.0,
            max_output_tokens=16,
        )
    except LLMError as e:
        raise AppError(
            code=ErrorCode.LLM_ERROR,
            reason=ErrorReason.LLM_FAILED.value,
            message=str(e),
            status_code=status.HTTP_502_BAD_GATEWAY,
        ) from e
    return {"ok": True, "sample": resp.output_text[:200]}
