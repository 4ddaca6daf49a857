"""
Utility functions for the Legal Document Explainer.
"""
import os
import json
import logging
from werkzeug.utils import secure_filename
from typing import Any, Dict, Optional

from config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE
from constants import MIME_TYPES_BY_EXTENSION, UNSUPPORTED_FILE_ERROR, FILE_TOO_LARGE_ERROR
from errors import ValidationError

logger = logging.getLogger(__name__)


def validate_upload(filename, size=None):
    """
    Validate an uploaded document before it is read.

    Args:
        filename: Name of the uploaded file
        size: Size in bytes, when known

    Returns:
        str: MIME type implied by the extension

    Raises:
        ValidationError: if the file is missing, has an unsupported
            extension or exceeds the upload limit
    """
    if not filename:
        raise ValidationError("No file selected")

    extension = os.path.splitext(filename)[1].lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(UNSUPPORTED_FILE_ERROR)

    if size is not None and size > MAX_FILE_SIZE:
        raise ValidationError(FILE_TOO_LARGE_ERROR.format(limit_mb=MAX_FILE_SIZE // (1024 * 1024)))

    return MIME_TYPES_BY_EXTENSION[extension]


def safe_file_cleanup(filepath):
    """
    Safely remove a file with error handling.

    Args:
        filepath: Path to file to remove

    Returns:
        bool: True if successfully removed or file doesn't exist
    """
    try:
        if os.path.exists(filepath):
            os.remove(filepath)
            logger.info(f"Cleaned up file: {filepath}")
        return True
    except OSError as e:
        logger.warning(f"Failed to cleanup file {filepath}: {str(e)}")
        return False


def get_secure_filename(original_filename):
    """
    Get a secure filename for upload.

    Args:
        original_filename: Original filename from upload

    Returns:
        str: Secure filename, keeping the original extension
    """
    extension = os.path.splitext(original_filename)[1].lower()
    filename = secure_filename(original_filename)
    # secure_filename drops non-ASCII characters, e.g. "अनुबंध.txt" -> "txt"
    stem = os.path.splitext(filename)[0] if filename.lower().endswith(extension) else filename
    return f"{stem or 'upload'}{extension}"


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence from model output."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned[3:]
        if cleaned[:4].lower() == "json":
            cleaned = cleaned[4:]
        if cleaned.rstrip().endswith("```"):
            cleaned = cleaned.rstrip()[:-3]
    return cleaned.strip()


def parse_json_response(response_content: str) -> Optional[Dict[str, Any]]:
    """Parse a JSON object from LLM output, handling code fences. Returns None if it is not one."""
    try:
        parsed = json.loads(strip_code_fences(response_content))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON: {str(e)}")
        return None
    return parsed if isinstance(parsed, dict) else None
