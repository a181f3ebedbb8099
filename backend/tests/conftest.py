import pytest

from docingest.extraction.orchestrator import ExtractionOrchestrator


CLEAN_PROSE = (
    "This is a standard document with proper sentences. It should be considered "
    "good quality and contain several readable words throughout."
)

HEAVY_ARTIFACTS = (
    "endstream endobj BT ET Td Tj TJ Tm Tc Tw Tz TL Ts Tr Tf \x00\x01\x02 garbled fragments "
) * 3

MODEL_REPLY = "The quarterly report covers hiring and retention across all teams."


class FakeCompletionService:
    """Records every call; raises `error` when set, else returns `reply`."""

    def __init__(self, reply: str = MODEL_REPLY, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def complete(self, system_instruction, user_content, temperature, max_output_tokens):
        self.calls.append(
            {
                "system_instruction": system_instruction,
                "user_content": user_content,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm():
    return FakeCompletionService()


@pytest.fixture
def failing_llm():
    return FakeCompletionService(error=TimeoutError("deadline exceeded"))


@pytest.fixture
def orchestrator(fake_llm):
    return ExtractionOrchestrator(completion_service=fake_llm)
