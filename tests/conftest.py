"""Shared fixtures for the test suite."""

import fitz  # PyMuPDF
import pytest

LEASE_TEXT = "The Tenant shall pay rent of $1000. The Landlord may terminate upon breach."


@pytest.fixture
def lease_text():
    return LEASE_TEXT


@pytest.fixture
def analysis_payload():
    """A service response with 3 key points and 4 clauses"""
    return {
        "summary": "A short residential lease with monthly rent and a termination right for the landlord.",
        "documentType": "lease agreement",
        "keyPoints": [
            {
                "text": "Rent of $1000 is payable by the tenant",
                "type": "important",
                "explanation": "You must budget for this payment every month."
            },
            {
                "text": "Landlord may terminate upon breach",
                "type": "critical",
                "explanation": "Any breach can end the lease."
            },
            {
                "text": "No late fee is specified",
                "type": "favorable",
                "explanation": "Late payment does not carry an automatic penalty."
            },
        ],
        "clauses": [
            {
                "title": "Rent",
                "original": "The Tenant shall pay rent of $1000.",
                "simplified": "You pay $1000 in rent.",
                "risk": "low"
            },
            {
                "title": "Termination",
                "original": "The Landlord may terminate upon breach.",
                "simplified": "The landlord can end the lease if you break it.",
                "risk": "high"
            },
            {
                "title": "Parties",
                "original": "The Tenant and the Landlord.",
                "simplified": "Who is bound by the lease.",
                "risk": "low"
            },
            {
                "title": "Remedies",
                "original": "Upon breach the Landlord may terminate.",
                "simplified": "What happens if a term is broken.",
                "risk": "medium"
            },
        ],
    }


@pytest.fixture
def make_pdf(tmp_path):
    """Write a PDF with one page per string and return its path"""
    def _make_pdf(pages, name="document.pdf"):
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path
    return _make_pdf
