"""Pydantic models for data validation and structure."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional

LanguageCode = Literal["en", "hi", "mr", "te", "kn", "ml"]
KeyPointType = Literal["important", "critical", "favorable"]
RiskLevel = Literal["low", "medium", "high"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KeyPoint(_CamelModel):
    """A short, categorized highlight drawn from the whole document."""
    text: str = Field(description="The highlight in one sentence.")
    type: KeyPointType = Field(description="Category of the highlight.")
    explanation: str = Field(description="Why this matters to the reader, in plain language.")


class Clause(_CamelModel):
    """One segment of the document with a plain-language rewrite and a risk tier."""
    title: str = Field(description="A concise title for the clause.")
    original: str = Field(description="The original clause text, first 200 characters at most.")
    simplified: str = Field(description="The clause rewritten for a non-lawyer.")
    risk: RiskLevel = Field(description="The assessed risk level.")


class AnalysisResult(_CamelModel):
    """Structured analysis of a legal document.

    A failed analysis is still an AnalysisResult: ``error`` is set and both
    lists are empty, so it can always be rendered.
    """
    summary: str = ""
    document_type: Optional[str] = None
    key_points: List[KeyPoint] = Field(default_factory=list)
    clauses: List[Clause] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failure(cls, message, summary=""):
        return cls(summary=summary, error=message)

    @classmethod
    def from_payload(cls, payload):
        """Build a result from a service response without validating enum values or bounds."""
        key_points = [
            KeyPoint.model_construct(
                text=item.get("text", ""),
                type=item.get("type", ""),
                explanation=item.get("explanation", ""),
            )
            for item in payload.get("keyPoints") or []
            if isinstance(item, dict)
        ]
        clauses = [
            Clause.model_construct(
                title=item.get("title", ""),
                original=item.get("original", ""),
                simplified=item.get("simplified", ""),
                risk=item.get("risk", ""),
            )
            for item in payload.get("clauses") or []
            if isinstance(item, dict)
        ]
        return cls.model_construct(
            summary=payload.get("summary") or "",
            document_type=payload.get("documentType"),
            key_points=key_points,
            clauses=clauses,
            error=payload.get("error"),
        )

    def to_payload(self):
        """JSON-ready dict using the wire (camelCase) field names."""
        payload = self.model_dump(by_alias=True, exclude_none=True, warnings=False)
        payload.setdefault("keyPoints", [])
        payload.setdefault("clauses", [])
        return payload


class Preferences(BaseModel):
    """Per-session display preferences, passed explicitly to the client and renderer."""
    language: LanguageCode = "en"
    theme: Literal["light", "dark"] = "light"
