"""
HTTP client for the document analysis service.
"""
import logging

import requests

from config import ANALYSIS_SERVICE_URL, REQUEST_TIMEOUT, MIN_CONTENT_LENGTH
from constants import DEFAULT_LANGUAGE, INSUFFICIENT_CONTENT_ERROR, INSUFFICIENT_CONTENT_SUMMARY
from errors import ValidationError, RateLimitError, QuotaError, UpstreamError
from schemas import AnalysisResult

logger = logging.getLogger(__name__)

_ERRORS_BY_STATUS = {
    400: ValidationError,
    402: QuotaError,
    429: RateLimitError,
}


class AnalysisClient:
    """
    Sends document text to the analysis service and returns its result.

    There is no automatic retry: each failure is raised once, as an
    ExplainerError whose ``result`` is a renderable error result.
    """

    def __init__(self, service_url=ANALYSIS_SERVICE_URL, timeout=REQUEST_TIMEOUT,
                 min_content_length=MIN_CONTENT_LENGTH, session=None):
        self.service_url = service_url
        self.timeout = timeout
        self.min_content_length = min_content_length
        self.session = session or requests.Session()

    def analyze(self, content, file_name=None, language=DEFAULT_LANGUAGE):
        """
        Analyze a document.

        Args:
            content: Document text
            file_name: Optional original file name
            language: Response language code

        Returns:
            AnalysisResult

        Raises:
            ValidationError: content too short (no request is sent) or rejected by the service
            RateLimitError: HTTP 429
            QuotaError: HTTP 402
            UpstreamError: any other failure, including timeouts and malformed responses
        """
        if not content or len(content.strip()) < self.min_content_length:
            raise ValidationError(INSUFFICIENT_CONTENT_ERROR, summary=INSUFFICIENT_CONTENT_SUMMARY)

        body = {"content": content, "language": language or DEFAULT_LANGUAGE}
        if file_name:
            body["fileName"] = file_name

        logger.info(f"Requesting analysis for {file_name or '(untitled)'} ({len(content)} chars)")
        try:
            response = self.session.post(self.service_url, json=body, timeout=self.timeout)
        except requests.Timeout as e:
            logger.error(f"Analysis request timed out after {self.timeout}s")
            raise UpstreamError("The analysis took too long. Please try again.", details=str(e)) from e
        except requests.RequestException as e:
            logger.error(f"Analysis request failed: {str(e)}")
            raise UpstreamError(details=str(e)) from e

        payload = self._read_payload(response)

        if response.status_code != 200:
            raise self._error_for(response.status_code, payload)

        if payload is None:
            logger.error("Analysis service returned a non-JSON body")
            raise UpstreamError("The analysis service returned an invalid response.")

        logger.info("Analysis received")
        return AnalysisResult.from_payload(payload)

    @staticmethod
    def _read_payload(response):
        try:
            payload = response.json()
        except ValueError:
            return None
        return payload if isinstance(payload, dict) else None

    @staticmethod
    def _error_for(status_code, payload):
        error_class = _ERRORS_BY_STATUS.get(status_code, UpstreamError)
        payload = payload or {}
        logger.error(f"Analysis service error {status_code}: {payload.get('error')}")

        # 429 and 402 keep their fixed user-facing messages
        if error_class in (RateLimitError, QuotaError):
            return error_class()
        return error_class(
            payload.get("error") or None,
            summary=payload.get("summary") or "",
            details=payload.get("details"),
        )
