"""Tests for the model-facing analysis logic"""

import json
from unittest.mock import MagicMock

import httpx
import openai
import pytest
from langchain_core.messages import AIMessage

import ai_processor
from errors import QuotaError, RateLimitError, UpstreamError, ValidationError


def tool_call_message(args):
    return AIMessage(
        content="",
        tool_calls=[{"name": "analyze_document", "args": args, "id": "call_1"}],
    )


def gateway_error(error_class, status_code, message):
    request = httpx.Request("POST", "https://gateway.test/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return error_class(message, response=response, body=None)


@pytest.fixture
def llm(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(ai_processor, "get_analysis_llm", lambda: fake)
    return fake


def test_tool_call_arguments_become_the_result(llm, lease_text, analysis_payload):
    """Test structured output read from the forced tool call"""
    llm.invoke.return_value = tool_call_message(analysis_payload)

    result = ai_processor.analyze_document(lease_text, file_name="lease.txt")

    assert result.summary == analysis_payload["summary"]
    assert [point.type for point in result.key_points] == ["important", "critical", "favorable"]
    assert [clause.risk for clause in result.clauses] == ["low", "high", "low", "medium"]


def test_plain_json_content_is_accepted(llm, lease_text, analysis_payload):
    """Test fallback to JSON in message content, with code fences stripped"""
    llm.invoke.return_value = AIMessage(content="```json\n" + json.dumps(analysis_payload) + "\n```")

    result = ai_processor.analyze_document(lease_text)

    assert len(result.clauses) == 4
    assert result.document_type == "lease agreement"


def test_unparseable_reply_degrades_to_minimal_result(llm):
    """Test that a non-JSON reply yields the safe fallback rather than an error"""
    content = "Lease agreement. " * 30
    llm.invoke.return_value = AIMessage(content="Sorry, I can only describe this document in prose.")

    result = ai_processor.analyze_document(content)

    assert result.summary.startswith("Document analysis completed.")
    assert result.error is None
    assert len(result.key_points) == 1
    assert result.key_points[0].type == "important"
    assert result.clauses[0].title == "General Provisions"
    assert result.clauses[0].risk == "medium"
    assert result.clauses[0].original == content[:200] + "..."


def test_out_of_schema_reply_degrades_to_minimal_result(llm, lease_text, analysis_payload):
    analysis_payload["clauses"][0]["risk"] = "catastrophic"
    llm.invoke.return_value = tool_call_message(analysis_payload)

    result = ai_processor.analyze_document(lease_text)

    assert result.clauses[0].title == "General Provisions"


def test_short_content_is_rejected_without_model_call(llm):
    with pytest.raises(ValidationError) as exc_info:
        ai_processor.analyze_document("tiny")

    llm.invoke.assert_not_called()
    assert exc_info.value.summary == "Provide a longer document to analyze."


def test_unknown_language_is_rejected(llm, lease_text):
    with pytest.raises(ValidationError):
        ai_processor.analyze_document(lease_text, language="fr")
    llm.invoke.assert_not_called()


def test_rate_limit_from_gateway(llm, lease_text):
    llm.invoke.side_effect = gateway_error(openai.RateLimitError, 429, "Too Many Requests")

    with pytest.raises(RateLimitError):
        ai_processor.analyze_document(lease_text)


def test_payment_required_from_gateway(llm, lease_text):
    llm.invoke.side_effect = gateway_error(openai.APIStatusError, 402, "Payment Required")

    with pytest.raises(QuotaError):
        ai_processor.analyze_document(lease_text)


def test_other_gateway_failures_are_upstream_errors(llm, lease_text):
    llm.invoke.side_effect = gateway_error(openai.InternalServerError, 503, "Service Unavailable")

    with pytest.raises(UpstreamError) as exc_info:
        ai_processor.analyze_document(lease_text)
    assert exc_info.value.message == "AI gateway error"
    assert exc_info.value.details


def test_missing_api_key(monkeypatch):
    monkeypatch.setattr(ai_processor, "LLM_API_KEY", None)

    with pytest.raises(UpstreamError) as exc_info:
        ai_processor.get_analysis_llm()
    assert "not configured" in exc_info.value.message


class TestPrompts:
    """Prompt construction"""

    def test_english_prompt_has_no_language_instruction(self, lease_text):
        system, user = ai_processor.build_messages(lease_text, "lease.txt", "en")
        assert "legal document analysis expert" in system.content
        assert "IMPORTANT" not in system.content
        assert "Filename: lease.txt" in user.content
        assert lease_text in user.content

    def test_other_languages_are_named(self, lease_text):
        system, _ = ai_processor.build_messages(lease_text, None, "kn")
        assert "Kannada" in system.content

    def test_untitled_document(self, lease_text):
        _, user = ai_processor.build_messages(lease_text)
        assert "Filename: (untitled)" in user.content
        assert "first 200 chars" in user.content
