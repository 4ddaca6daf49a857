import os
import logging
from datetime import datetime
from flask import Flask, Response, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError as SchemaValidationError

# Import configuration and processing functions
from config import UPLOAD_FOLDER, API_HOST, API_PORT, API_DEBUG, API_VERSION, MAX_FILE_SIZE
from constants import DEFAULT_LANGUAGE, FILE_TOO_LARGE_ERROR, TECHNICAL_FAILURE_SUMMARY
from ai_processor import analyze_document
from errors import ExplainerError, ValidationError
from extractor import extract_text
from renderer import build_report, render_html, report_filename
from schemas import AnalysisResult, Preferences
from utils import get_secure_filename, safe_file_cleanup, validate_upload

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- FLASK APP SETUP ---
app = Flask(__name__)
CORS(app)  # Cross-origin calls from the hosting origin, including OPTIONS preflight

# File upload directory configuration
os.makedirs(UPLOAD_FOLDER, exist_ok=True)
app.config['UPLOAD_FOLDER'] = UPLOAD_FOLDER
app.config['MAX_CONTENT_LENGTH'] = MAX_FILE_SIZE

logger.info("Flask application initialized")


def error_response(error):
    return jsonify(error.to_payload()), error.status_code


@app.errorhandler(413)
def request_too_large(_):
    message = FILE_TOO_LARGE_ERROR.format(limit_mb=MAX_FILE_SIZE // (1024 * 1024))
    return jsonify(AnalysisResult.failure(message).to_payload()), 413


# --- API ENDPOINTS ---

@app.route('/ping', methods=['GET'])
def ping():
    """
    Health check endpoint to verify the server is running.
    Returns server status and timestamp.
    """
    return jsonify({
        "status": "ok",
        "message": "Legal Document Explainer API is running",
        "timestamp": datetime.now().isoformat(),
        "version": API_VERSION
    }), 200


@app.route('/analyze-document', methods=['POST'])
def analyze():
    """
    Analyzes document text and returns an AnalysisResult.
    Every response, including errors, has the AnalysisResult shape.
    """
    try:
        data = request.get_json(silent=True) or {}
        result = analyze_document(
            data.get('content'),
            file_name=data.get('fileName'),
            language=data.get('language') or DEFAULT_LANGUAGE,
        )
        return jsonify(result.to_payload()), 200

    except ExplainerError as e:
        return error_response(e)

    except Exception as e:
        logger.exception(f"Error in analyze-document: {str(e)}")
        failure = AnalysisResult.failure(str(e) or "Unknown error", summary=TECHNICAL_FAILURE_SUMMARY)
        return jsonify(failure.to_payload()), 500


@app.route('/extract', methods=['POST'])
def extract():
    """
    Handles PDF or text upload and returns the extracted text.
    """
    filepath = None

    try:
        file = request.files.get('file')
        if file is None:
            raise ValidationError("No file part in the request")

        mime_type = validate_upload(file.filename, request.content_length)

        # Save file securely; non-ASCII names can lose their stem entirely
        filename = get_secure_filename(file.filename)
        filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
        file.save(filepath)

        logger.info(f"Extracting text from upload: {filename}")
        text = extract_text(filepath, mime_type)
        return jsonify({"text": text, "fileName": file.filename}), 200

    except ExplainerError as e:
        return error_response(e)

    except Exception as e:
        # Error handling for storage or processing failures
        logger.exception(f"Text extraction failed: {str(e)}")
        failure = AnalysisResult.failure(
            f"An error occurred while reading the file: {str(e)}", summary=TECHNICAL_FAILURE_SUMMARY
        )
        return jsonify(failure.to_payload()), 500

    finally:
        # Temporary file cleanup
        if filepath:
            safe_file_cleanup(filepath)


@app.route('/report', methods=['POST'])
def download_report():
    """
    Returns the plain-text analysis report as a file download.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data.get('result'), dict):
        return error_response(ValidationError("Missing 'result' in request body"))

    result = AnalysisResult.from_payload(data['result'])
    report = build_report(result, data.get('fileName'))
    return Response(
        report,
        mimetype='text/plain',
        headers={"Content-Disposition": f"attachment; filename={report_filename()}"},
    )


@app.route('/render', methods=['POST'])
def render():
    """
    Renders the split view (highlighted original beside the analysis) as HTML.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data.get('result'), dict) or not isinstance(data.get('content'), str):
        return error_response(ValidationError("Missing 'result' or 'content' in request body"))

    try:
        preferences = Preferences(
            language=data.get('language') or DEFAULT_LANGUAGE,
            theme=data.get('theme') or "light",
        )
    except SchemaValidationError:
        return error_response(ValidationError("Unsupported language or theme"))

    result = AnalysisResult.from_payload(data['result'])
    html = render_html(result, data['content'], data.get('fileName'), preferences)
    return Response(html, mimetype='text/html')


def run_server(host=API_HOST, port=API_PORT, debug=API_DEBUG):
    logger.info(f"Starting Legal Document Explainer API on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


# --- RUN THE APP ---
if __name__ == '__main__':
    run_server()
