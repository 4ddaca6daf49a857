import logging
import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import ValidationError as SchemaValidationError

# Import configuration
from config import (
    LLM_API_KEY, LLM_BASE_URL, ANALYSIS_MODEL, ANALYSIS_TEMPERATURE,
    LLM_TIMEOUT, MIN_CONTENT_LENGTH, CLAUSE_QUOTE_LENGTH
)
from constants import (
    ANALYZE_TOOL, ANALYZE_TOOL_NAME, LANGUAGE_NAMES, DEFAULT_LANGUAGE,
    SYSTEM_PROMPT_TEMPLATE, LANGUAGE_INSTRUCTION_TEMPLATE, USER_PROMPT_TEMPLATE,
    INSUFFICIENT_CONTENT_ERROR, INSUFFICIENT_CONTENT_SUMMARY, UNSUPPORTED_LANGUAGE_ERROR,
    TECHNICAL_FAILURE_SUMMARY, FALLBACK_SUMMARY, FALLBACK_DOCUMENT_TYPE, FALLBACK_KEY_POINT,
    FALLBACK_CLAUSE_TITLE, FALLBACK_CLAUSE_SIMPLIFIED
)
from errors import ValidationError, RateLimitError, QuotaError, UpstreamError, ParseError
from schemas import AnalysisResult, Clause, KeyPoint
from utils import parse_json_response

logger = logging.getLogger(__name__)

# --- INITIALIZATION ---

# Created on first use so the service can start without credentials
_analysis_llm = None


def get_analysis_llm():
    """Return the chat model bound to the analyze_document tool."""
    global _analysis_llm

    if not LLM_API_KEY:
        raise UpstreamError("LLM_API_KEY is not configured", summary=TECHNICAL_FAILURE_SUMMARY)

    if _analysis_llm is None:
        llm = ChatOpenAI(
            api_key=LLM_API_KEY,
            base_url=LLM_BASE_URL,
            model=ANALYSIS_MODEL,
            temperature=ANALYSIS_TEMPERATURE,
            timeout=LLM_TIMEOUT,
            max_retries=0,
        )
        _analysis_llm = llm.bind_tools([ANALYZE_TOOL], tool_choice=ANALYZE_TOOL_NAME)
    return _analysis_llm


# --- HELPER FUNCTIONS FOR ANALYSIS ---

def validate_request(content, language):
    if not content or not isinstance(content, str) or len(content.strip()) < MIN_CONTENT_LENGTH:
        raise ValidationError(INSUFFICIENT_CONTENT_ERROR, summary=INSUFFICIENT_CONTENT_SUMMARY)

    if language not in LANGUAGE_NAMES:
        raise ValidationError(UNSUPPORTED_LANGUAGE_ERROR.format(codes=", ".join(LANGUAGE_NAMES)))


def build_messages(content, file_name=None, language=DEFAULT_LANGUAGE):
    """Build the system and user prompts for one analysis."""
    language_instruction = ""
    if language != DEFAULT_LANGUAGE:
        language_instruction = LANGUAGE_INSTRUCTION_TEMPLATE.format(
            language_name=LANGUAGE_NAMES.get(language, "English")
        )

    system_prompt = SYSTEM_PROMPT_TEMPLATE.format(language_instruction=language_instruction).strip()
    user_prompt = USER_PROMPT_TEMPLATE.format(
        file_name=file_name or "(untitled)",
        quote_length=CLAUSE_QUOTE_LENGTH,
        content=content,
    )
    return [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]


def parse_model_response(message):
    """
    Turn the model's reply into an AnalysisResult.

    Tool-call arguments are preferred; if the model answered in plain
    content instead, that content is parsed as JSON.

    Raises:
        ParseError: if no valid analysis can be read from the reply
    """
    tool_calls = getattr(message, "tool_calls", None) or []
    invalid_tool_calls = getattr(message, "invalid_tool_calls", None) or []

    if tool_calls:
        data = tool_calls[0].get("args")
    elif invalid_tool_calls:
        raise ParseError(details="Model returned malformed tool arguments.")
    else:
        content = getattr(message, "content", None)
        data = parse_json_response(content) if isinstance(content, str) and content.strip() else None

    if not isinstance(data, dict):
        raise ParseError(details="Model reply contained no structured analysis.")

    try:
        return AnalysisResult.model_validate(data)
    except SchemaValidationError as e:
        raise ParseError(details=str(e)) from e


def build_fallback_result(content):
    """Minimal valid result used when the model reply cannot be parsed."""
    return AnalysisResult(
        summary=FALLBACK_SUMMARY,
        document_type=FALLBACK_DOCUMENT_TYPE,
        key_points=[KeyPoint(**FALLBACK_KEY_POINT)],
        clauses=[
            Clause(
                title=FALLBACK_CLAUSE_TITLE,
                original=content[:CLAUSE_QUOTE_LENGTH] + "...",
                simplified=FALLBACK_CLAUSE_SIMPLIFIED,
                risk="medium",
            )
        ],
    )


def _translate_gateway_error(e):
    status = getattr(e, "status_code", None)
    if status == 429:
        return RateLimitError()
    if status == 402:
        return QuotaError()
    return UpstreamError(details=getattr(e, "message", None) or str(e))


# --- MAIN PUBLIC FUNCTIONS ---

def analyze_document(content, file_name=None, language=DEFAULT_LANGUAGE):
    """
    Analyze a legal document with the hosted model.

    Args:
        content: Full document text
        file_name: Original file name, used only in the prompt
        language: Response language code

    Returns:
        AnalysisResult: always a renderable result on success, falling back
        to a minimal analysis when the model reply cannot be parsed

    Raises:
        ValidationError, RateLimitError, QuotaError, UpstreamError
    """
    language = language or DEFAULT_LANGUAGE
    validate_request(content, language)

    logger.info(f"Analyzing document: {file_name or '(untitled)'} Length: {len(content)}")
    llm = get_analysis_llm()

    try:
        message = llm.invoke(build_messages(content, file_name, language))
    except openai.APIStatusError as e:
        logger.error(f"AI gateway error: {e.status_code} {str(e)}")
        raise _translate_gateway_error(e) from e
    except openai.APIConnectionError as e:
        logger.error(f"AI gateway unreachable: {str(e)}")
        raise UpstreamError(details=str(e)) from e

    logger.info("AI gateway response received")

    try:
        result = parse_model_response(message)
    except ParseError as e:
        logger.error(f"Parse error: {e.details}")
        return build_fallback_result(content)

    logger.info(
        f"Analysis complete: {len(result.key_points)} key points, {len(result.clauses)} clauses"
    )
    return result
