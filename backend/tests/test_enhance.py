from docingest.extraction.enhance import EMPTY_REPLY, UNAVAILABLE, LanguageModelExtractor
from docingest.extraction.types import EnhanceMode

from tests.conftest import FakeCompletionService


def test_enhance_sends_bounded_low_temperature_request(fake_llm):
    extractor = LanguageModelExtractor(fake_llm)
    outcome = extractor.enhance("short raw text", EnhanceMode.ENHANCE)

    assert outcome.ok
    assert outcome.text == "The quarterly report covers hiring and retention across all teams."
    call = fake_llm.calls[0]
    assert call["temperature"] == 0.1
    assert call["max_output_tokens"] == 2000
    assert "short raw text" in call["user_content"]
    assert "[Content truncated" not in call["user_content"]
    assert "document parser" in call["system_instruction"]


def test_enhance_truncates_to_eight_thousand_chars(fake_llm):
    LanguageModelExtractor(fake_llm).enhance("a" * 9000, EnhanceMode.ENHANCE)
    user_content = fake_llm.calls[0]["user_content"]
    assert "a" * 8000 + "\n\n[Content truncated for processing]" in user_content
    assert "a" * 8001 not in user_content


def test_reconstruct_uses_smaller_excerpt_and_larger_reply_budget(fake_llm):
    LanguageModelExtractor(fake_llm).enhance("b" * 7000, EnhanceMode.RECONSTRUCT)
    call = fake_llm.calls[0]
    assert "b" * 6000 + "\n\n[Content truncated]" in call["user_content"]
    assert "b" * 6001 not in call["user_content"]
    assert call["max_output_tokens"] == 3000
    assert "OCR specialist" in call["system_instruction"]


def test_no_truncation_marker_at_exact_budget(fake_llm):
    LanguageModelExtractor(fake_llm).enhance("c" * 6000, EnhanceMode.RECONSTRUCT)
    assert "[Content truncated]" not in fake_llm.calls[0]["user_content"]


def test_reply_is_sanitized():
    llm = FakeCompletionService(reply="```\nraw\n```Summary (draft) [1] of the plan & goals.")
    outcome = LanguageModelExtractor(llm).enhance("raw", EnhanceMode.ENHANCE)
    assert outcome.text == "Summary of the plan goals."


def test_collaborator_failure_is_returned_not_raised(failing_llm):
    outcome = LanguageModelExtractor(failing_llm).enhance("raw", EnhanceMode.ENHANCE)
    assert not outcome.ok
    assert outcome.text is None
    assert outcome.error == "deadline exceeded"


def test_exception_without_message_reports_its_type():
    llm = FakeCompletionService(error=ConnectionError())
    outcome = LanguageModelExtractor(llm).enhance("raw", EnhanceMode.ENHANCE)
    assert outcome.error == "ConnectionError"


def test_missing_service_reports_unavailable():
    outcome = LanguageModelExtractor(None).enhance("raw", EnhanceMode.RECONSTRUCT)
    assert not outcome.ok
    assert outcome.error == UNAVAILABLE


def test_reply_that_sanitizes_to_nothing_is_a_failure():
    llm = FakeCompletionService(reply="```only code```")
    outcome = LanguageModelExtractor(llm).enhance("raw", EnhanceMode.ENHANCE)
    assert outcome.error == EMPTY_REPLY
