"""
One analysis session: document in, rendered analysis out.

    idle -> extracting -> requesting -> (success | error) -> rendered

``rendered`` is terminal. To analyze another document, start a new session.
"""
import logging
from enum import Enum
from pathlib import Path

from client import AnalysisClient
from errors import ExplainerError
from extractor import extract_text
from progress import ProgressSimulator, run_with_progress
from renderer import build_report, render_analysis, render_html
from schemas import Preferences

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    REQUESTING = "requesting"
    SUCCESS = "success"
    ERROR = "error"
    RENDERED = "rendered"


class SessionStateError(RuntimeError):
    """An operation was called in a state that does not allow it."""


class AnalysisSession:
    def __init__(self, client=None, preferences=None, progress_interval=None, on_progress=None):
        self.client = client or AnalysisClient()
        self.preferences = preferences or Preferences()
        self.progress_interval = progress_interval
        self.on_progress = on_progress
        self.state = SessionState.IDLE
        self.content = None
        self.file_name = None
        self.result = None
        self.error = None
        self.view = None
        self._simulator = None

    def _require(self, *states):
        if self.state not in states:
            expected = ", ".join(state.value for state in states)
            raise SessionStateError(f"Session is {self.state.value}, expected {expected}")

    def _fail(self, error):
        logger.error(f"Session failed in {self.state.value}: {error.message}")
        self.error = error
        self.result = error.to_result()
        self.state = SessionState.ERROR

    def load_text(self, text, file_name=None):
        """Use pasted text as the document."""
        self._require(SessionState.IDLE)
        self.state = SessionState.EXTRACTING
        self.content = text
        self.file_name = file_name

    def load_file(self, filepath, mime_type=None, file_name=None):
        """Extract the document from a PDF or text file."""
        self._require(SessionState.IDLE)
        self.state = SessionState.EXTRACTING
        self.file_name = file_name or Path(filepath).name
        try:
            self.content = extract_text(filepath, mime_type)
        except ExplainerError as e:
            self._fail(e)

    def run(self):
        """
        Send the document for analysis and render the outcome.

        Errors do not escape: they become a degenerate result, which is
        rendered like any other.
        """
        self._require(SessionState.EXTRACTING, SessionState.ERROR)

        if self.state == SessionState.EXTRACTING:
            self.state = SessionState.REQUESTING
            kwargs = {"on_update": self.on_progress}
            if self.progress_interval is not None:
                kwargs["interval"] = self.progress_interval
            self._simulator = ProgressSimulator(**kwargs)
            try:
                self.result = run_with_progress(
                    self.client.analyze,
                    self.content,
                    file_name=self.file_name,
                    language=self.preferences.language,
                    simulator=self._simulator,
                )
                self.state = SessionState.SUCCESS
            except ExplainerError as e:
                self._fail(e)

        self.view = render_analysis(self.result, self.content or "", self.file_name, self.preferences)
        self.state = SessionState.RENDERED
        return self.view

    def html(self):
        self._require(SessionState.RENDERED)
        return render_html(self.result, self.content or "", self.file_name, self.preferences)

    def report(self, generated=None):
        self._require(SessionState.RENDERED)
        return build_report(self.result, self.file_name, generated)

    def close(self):
        """Stop the progress timer if the session is abandoned mid-request."""
        if self._simulator is not None:
            self._simulator.stop()
