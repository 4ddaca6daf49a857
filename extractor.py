"""
Text extraction for uploaded documents (plain text and PDF).
"""
import logging
import mimetypes
from pathlib import Path

from langchain_community.document_loaders import PyMuPDFLoader

from constants import SUPPORTED_MIME_TYPES, UNSUPPORTED_FILE_ERROR
from errors import ExtractionError, ValidationError

logger = logging.getLogger(__name__)


def guess_mime_type(filepath):
    mime_type, _ = mimetypes.guess_type(str(filepath))
    return mime_type


def extract_text(filepath, mime_type=None):
    """
    Extract plain text from a PDF or text file.

    Args:
        filepath: Path to the file on disk
        mime_type: Declared type of the file; guessed from the name if omitted

    Returns:
        str: Extracted text

    Raises:
        ValidationError: for file types other than PDF and plain text
        ExtractionError: if the file cannot be read or parsed
    """
    mime_type = mime_type or guess_mime_type(filepath)
    if mime_type not in SUPPORTED_MIME_TYPES:
        logger.warning(f"Rejected unsupported file type {mime_type!r} for {filepath}")
        raise ValidationError(UNSUPPORTED_FILE_ERROR)

    if mime_type == "text/plain":
        return _read_plain_text(filepath)
    return _read_pdf(filepath)


def _read_plain_text(filepath):
    try:
        return Path(filepath).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read text file {filepath}: {str(e)}")
        raise ExtractionError(details=str(e)) from e


def _read_pdf(filepath):
    logger.info(f"Extracting text from PDF: {filepath}")
    try:
        pages = PyMuPDFLoader(str(filepath)).load()
    except Exception as e:
        logger.error(f"PDF extraction failed for {filepath}: {str(e)}")
        raise ExtractionError(details=str(e)) from e

    page_texts = [_join_fragments(page.page_content) for page in pages]
    logger.info(f"Extracted {len(page_texts)} page(s) from {filepath}")
    return "\n\n".join(page_texts).strip()


def _join_fragments(page_content):
    # One line per page: fragments joined with single spaces
    fragments = (line.strip() for line in page_content.splitlines())
    return " ".join(fragment for fragment in fragments if fragment)
