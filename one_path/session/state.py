"""
Session state for a single user: which view is active, the current analysis
result and the study position.

All transitions go through Session methods. A new successful submission
replaces the result wholesale and resets the study position; nothing is
shared between sessions.
"""
import logging
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from one_path.analysis.schemas import AnalysisResult
from one_path.errors import (
    AnalysisError,
    IntakeError,
    InvalidTransitionError,
    StudyUnavailableError,
    SubmissionInProgressError,
)
from one_path.intake.document_intake import DocumentIntake, DocumentPayload, DocumentRole
from one_path.roadmap.flatten import StudyUnit, flatten
from one_path.study.navigator import StudyNavigator

logger = logging.getLogger(__name__)

AnalyzeFn = Callable[[DocumentPayload, DocumentPayload], AnalysisResult]


class View(str, Enum):
    LANDING = "landing"
    RESULTS = "results"
    STUDY = "study"


class ResultsTab(str, Enum):
    ANALYSIS = "analysis"
    ROADMAP = "roadmap"


class Session:
    """
    View state machine for one user session.

    Landing --submit ok--> Results(Analysis) --enter_study--> Study --exit_study--> Results
    A failed submission leaves the view unchanged and records an error message.
    """

    def __init__(self, config=None):
        self.config = config
        self.intake = DocumentIntake(config)
        self._clear_state()

    def _clear_state(self):
        self.session_id = str(uuid.uuid4())
        self.created_at = datetime.now()
        self.view = View.LANDING
        self.active_tab = ResultsTab.ANALYSIS
        self.result: Optional[AnalysisResult] = None
        self.study_units: List[StudyUnit] = []
        self.navigator: Optional[StudyNavigator] = None
        self.loading = False
        self.error = ""
        self._document_errors: Dict[DocumentRole, str] = {}

    # --- Documents ---

    def set_document(self, role: DocumentRole, path: Union[str, Path, None]) -> bool:
        """
        Load a document into the user or target slot.

        Returns:
            True if the document was accepted, False if intake failed (the
            slot is emptied and the message is stored in ``error``)
        """
        try:
            self.intake.set(role, path)
        except IntakeError as e:
            self._document_errors[role] = e.message
            self.error = e.message
            return False
        self._document_errors.pop(role, None)
        self._refresh_document_error()
        return True

    def clear_document(self, role: DocumentRole):
        self.intake.clear(role)
        self._document_errors.pop(role, None)
        self._refresh_document_error()

    def _refresh_document_error(self):
        # A failure on the other slot stays visible until that slot is fixed
        self.error = next(iter(self._document_errors.values()), "")

    @property
    def can_submit(self) -> bool:
        return self.intake.is_ready and not self.loading

    # --- Submission ---

    def submit(self, analyze: AnalyzeFn) -> bool:
        """
        Run one analysis for the current document pair.

        Args:
            analyze: Callable taking (user_payload, target_payload) and
                returning an AnalysisResult, usually AnalysisEngine.analyze

        Returns:
            True on success (view becomes Results/Analysis), False on failure
            (view, result and study position are unchanged; ``error`` holds
            the message)

        Raises:
            SubmissionInProgressError: another submission is still outstanding
        """
        if self.loading:
            raise SubmissionInProgressError("An analysis is already running. Please wait for it to finish.")

        self.error = ""
        if not self.intake.is_ready:
            self.error = "Please upload both your resume and the target profile."
            return False

        self.loading = True
        try:
            result = analyze(self.intake.user, self.intake.target)
        except AnalysisError as e:
            self.error = e.message
            return False
        finally:
            self.loading = False

        self._install_result(result)
        logger.info(f"Session {self.session_id}: analysis ready, {len(self.study_units)} study unit(s)")
        return True

    def _install_result(self, result: AnalysisResult):
        self.result = result
        self.study_units = flatten(result.roadmaps)
        self.navigator = None
        self.view = View.RESULTS
        self.active_tab = ResultsTab.ANALYSIS

    # --- Results ---

    def select_tab(self, tab: ResultsTab):
        if self.view != View.RESULTS:
            raise InvalidTransitionError(f"Tabs can only be switched on the results view (current: {self.view.value}).")
        self.active_tab = ResultsTab(tab)

    @property
    def can_enter_study(self) -> bool:
        return self.result is not None and self.result.has_study_units

    def enter_study(self) -> StudyNavigator:
        """
        Switch to the study view, resuming at the last visited unit.

        Raises:
            InvalidTransitionError: not on the results view
            StudyUnavailableError: the roadmap has no topics
        """
        if self.view != View.RESULTS or self.result is None:
            raise InvalidTransitionError("The study area can only be entered from the results view.")
        if not self.study_units:
            raise StudyUnavailableError("No skill gaps were found, so there is no roadmap to study.")

        if self.navigator is None:
            self.navigator = StudyNavigator(self.study_units)
        self.view = View.STUDY
        return self.navigator

    def exit_study(self):
        """Return to the results view. Study position and active tab are kept."""
        if self.view != View.STUDY:
            raise InvalidTransitionError("Not in the study area.")
        self.view = View.RESULTS

    # --- Study navigation ---

    def _require_study(self) -> StudyNavigator:
        if self.view != View.STUDY or self.navigator is None:
            raise InvalidTransitionError("Study navigation is only available in the study area.")
        return self.navigator

    def next_unit(self) -> StudyUnit:
        return self._require_study().next()

    def previous_unit(self) -> StudyUnit:
        return self._require_study().previous()

    # --- Lifecycle ---

    def start_over(self):
        """Go back to the landing view, discarding the result. Chosen documents are kept."""
        if self.loading:
            raise SubmissionInProgressError("An analysis is already running. Please wait for it to finish.")
        self.result = None
        self.study_units = []
        self.navigator = None
        self._refresh_document_error()
        self.view = View.LANDING
        self.active_tab = ResultsTab.ANALYSIS

    def reset(self):
        """Discard everything, including documents, and start a new session id."""
        self.intake.clear()
        self._clear_state()

    def snapshot(self) -> Dict[str, Any]:
        """Summary of the session state."""
        return {
            "session_id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "view": self.view.value,
            "active_tab": self.active_tab.value,
            "has_result": self.result is not None,
            "study_units": len(self.study_units),
            "current_index": self.navigator.current_index if self.navigator else None,
            "progress": self.navigator.progress() if self.navigator else None,
            "loading": self.loading,
            "error": self.error,
        }
