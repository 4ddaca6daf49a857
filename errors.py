"""Error taxonomy for the document analysis pipeline.

Every error knows the HTTP status it maps to and can turn itself into a
degenerate AnalysisResult, so callers always have something to render.
"""

from schemas import AnalysisResult


class ExplainerError(Exception):
    """Base class for all pipeline errors."""
    status_code = 500
    default_message = "Something went wrong while analyzing the document."

    def __init__(self, message=None, summary="", details=None):
        self.message = message or self.default_message
        self.summary = summary
        self.details = details
        super().__init__(self.message)

    @property
    def result(self):
        return self.to_result()

    def to_result(self):
        return AnalysisResult.failure(self.message, summary=self.summary)

    def to_payload(self):
        payload = self.to_result().to_payload()
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(ExplainerError):
    """Unsupported file type, oversized upload or too little content. Raised before any remote call."""
    status_code = 400
    default_message = "No or insufficient document content provided."


class ExtractionError(ExplainerError):
    """The uploaded file could not be parsed."""
    status_code = 422
    default_message = "Could not extract text from the file. Please try a different file."


class RateLimitError(ExplainerError):
    status_code = 429
    default_message = "Rate limits exceeded, please try again shortly."


class QuotaError(ExplainerError):
    status_code = 402
    default_message = "Payment required for AI usage. Please add credits to your workspace."


class UpstreamError(ExplainerError):
    """Gateway failure, timeout or malformed response."""
    status_code = 500
    default_message = "AI gateway error"


class ParseError(ExplainerError):
    """The model answered with something that is not a structured analysis."""
    status_code = 500
    default_message = "Failed to parse the analysis."
