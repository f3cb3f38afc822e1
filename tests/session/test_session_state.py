"""
Tests for session/state.py - View state machine
"""
import json

import pytest
from unittest.mock import Mock

from one_path.analysis.engine import AnalysisEngine
from one_path.analysis.schemas import AnalysisResult
from one_path.errors import (
    ContractViolationError,
    EngineRequestError,
    InvalidTransitionError,
    StudyUnavailableError,
    SubmissionInProgressError,
)
from one_path.intake.document_intake import DocumentRole
from one_path.session.state import ResultsTab, Session, View


@pytest.fixture
def session(mock_config, resume_files):
    """Session with both documents loaded"""
    session = Session(mock_config)
    user, target = resume_files
    assert session.set_document(DocumentRole.USER, user)
    assert session.set_document(DocumentRole.TARGET, target)
    return session


@pytest.fixture
def sample_result(sample_reply):
    return AnalysisResult.model_validate(sample_reply)


@pytest.fixture
def analyze(sample_result):
    return Mock(return_value=sample_result)


class TestInitialState:
    """Test a fresh session"""

    def test_starts_on_landing(self, mock_config):
        session = Session(mock_config)

        assert session.view == View.LANDING
        assert session.result is None
        assert session.navigator is None
        assert session.can_submit is False
        assert session.can_enter_study is False

    def test_can_submit_with_both_documents(self, session):
        assert session.can_submit is True


class TestDocuments:
    """Test document selection through the session"""

    def test_intake_failure_recorded(self, mock_config, tmp_path):
        session = Session(mock_config)
        missing = tmp_path / "nope.pdf"

        accepted = session.set_document(DocumentRole.USER, missing)

        assert accepted is False
        assert "nope.pdf" in session.error
        assert session.intake.user is None

    def test_successful_document_clears_error(self, mock_config, resume_files, tmp_path):
        session = Session(mock_config)
        session.set_document(DocumentRole.USER, tmp_path / "nope.pdf")

        session.set_document(DocumentRole.USER, resume_files[0])

        assert session.error == ""

    def test_clear_document(self, session):
        session.clear_document(DocumentRole.TARGET)

        assert session.can_submit is False

    def test_rejected_replacement_blocks_submit(self, session, tmp_path):
        """Test that the analysed document is never an older one than the user last chose"""
        rejected = tmp_path / "new_resume.docx"
        rejected.write_bytes(b"PK docx")

        accepted = session.set_document(DocumentRole.USER, rejected)

        assert accepted is False
        assert session.intake.user is None
        assert session.can_submit is False
        assert "new_resume.docx" in session.error

    def test_failure_stays_visible_after_other_slot_succeeds(self, mock_config, resume_files, tmp_path):
        session = Session(mock_config)
        session.set_document(DocumentRole.USER, tmp_path / "nope.pdf")

        assert session.set_document(DocumentRole.TARGET, resume_files[1]) is True

        assert "nope.pdf" in session.error

    def test_clearing_failed_slot_clears_its_error(self, mock_config, tmp_path):
        session = Session(mock_config)
        session.set_document(DocumentRole.USER, tmp_path / "nope.pdf")

        session.clear_document(DocumentRole.USER)

        assert session.error == ""


class TestSubmit:
    """Test submission transitions"""

    def test_success_moves_to_results_analysis(self, session, analyze, sample_result):
        assert session.submit(analyze) is True

        assert session.view == View.RESULTS
        assert session.active_tab == ResultsTab.ANALYSIS
        assert session.result is sample_result
        assert len(session.study_units) == 2
        assert session.loading is False
        analyze.assert_called_once_with(session.intake.user, session.intake.target)

    @pytest.mark.parametrize("error", [
        EngineRequestError("network down"),
        ContractViolationError("bad JSON"),
    ])
    def test_failure_stays_on_landing(self, session, error):
        analyze = Mock(side_effect=error)

        assert session.submit(analyze) is False

        assert session.view == View.LANDING
        assert session.result is None
        assert session.error == error.message
        assert session.loading is False

    def test_missing_documents_rejected_without_call(self, mock_config):
        session = Session(mock_config)
        analyze = Mock()

        assert session.submit(analyze) is False

        analyze.assert_not_called()
        assert session.error

    def test_reentrant_submit_rejected(self, session, sample_result):
        """Test that a second submission while one is in flight is rejected"""
        nested = {}

        def analyze(user, target):
            with pytest.raises(SubmissionInProgressError):
                session.submit(Mock())
            nested["checked"] = True
            return sample_result

        assert session.submit(analyze) is True
        assert nested["checked"] is True

    def test_can_submit_false_while_loading(self, session, sample_result):
        observed = {}

        def analyze(user, target):
            observed["can_submit"] = session.can_submit
            return sample_result

        session.submit(analyze)

        assert observed["can_submit"] is False
        assert session.can_submit is True

    def test_new_submission_resets_everything(self, session, analyze, sample_reply):
        """Test that a fresh success from the study view resets to Results(Analysis) at index 0"""
        session.submit(analyze)
        session.select_tab(ResultsTab.ROADMAP)
        session.enter_study()
        session.next_unit()

        fresh = AnalysisResult.model_validate(sample_reply)
        assert session.submit(Mock(return_value=fresh)) is True

        assert session.view == View.RESULTS
        assert session.active_tab == ResultsTab.ANALYSIS
        assert session.result is fresh
        assert session.navigator is None
        assert session.enter_study().current_index == 0

    def test_failed_resubmission_keeps_previous_result(self, session, analyze, sample_result):
        session.submit(analyze)

        session.submit(Mock(side_effect=EngineRequestError("timeout")))

        assert session.view == View.RESULTS
        assert session.result is sample_result
        assert session.error == "timeout"

    def test_submission_through_engine(self, session, mock_llm, mock_config):
        """Test the full path: documents -> engine -> results"""
        engine = AnalysisEngine(mock_llm, mock_config)

        assert session.submit(engine.analyze) is True

        assert session.view == View.RESULTS
        assert mock_llm.invoke.call_count == 1

    def test_engine_contract_violation_through_session(self, session, mock_llm, mock_config, sample_reply):
        """Test that an invalid reply leaves no partial result"""
        from langchain_core.messages import AIMessage
        del sample_reply["roadmaps"][0]["skill"]
        mock_llm.invoke.return_value = AIMessage(content=json.dumps(sample_reply))
        engine = AnalysisEngine(mock_llm, mock_config)

        assert session.submit(engine.analyze) is False

        assert session.result is None
        assert session.view == View.LANDING


class TestResultsAndStudy:
    """Test tab switching and study transitions"""

    def test_select_tab(self, session, analyze):
        session.submit(analyze)

        session.select_tab(ResultsTab.ROADMAP)

        assert session.active_tab == ResultsTab.ROADMAP

    def test_select_tab_outside_results(self, session):
        with pytest.raises(InvalidTransitionError):
            session.select_tab(ResultsTab.ROADMAP)

    def test_enter_study_from_landing_rejected(self, session):
        with pytest.raises(InvalidTransitionError):
            session.enter_study()

    def test_enter_study_starts_at_zero(self, session, analyze):
        session.submit(analyze)

        navigator = session.enter_study()

        assert session.view == View.STUDY
        assert navigator.current_index == 0
        assert navigator.progress() == 50.0

    def test_zero_roadmaps_not_enterable(self, session, sample_reply):
        """Test that a result without roadmaps never reaches the study view"""
        sample_reply["roadmaps"] = []
        session.submit(Mock(return_value=AnalysisResult.model_validate(sample_reply)))

        assert session.can_enter_study is False
        with pytest.raises(StudyUnavailableError):
            session.enter_study()
        assert session.view == View.RESULTS
        assert session.navigator is None

    @pytest.mark.parametrize("steps", [0, 1, 3])
    def test_exit_and_reenter_resumes_position(self, session, analyze, steps):
        """Test continuity: exiting at index k and re-entering resumes at k"""
        session.submit(analyze)
        session.enter_study()
        for _ in range(steps):
            session.next_unit()
        position = session.navigator.current_index

        session.exit_study()
        assert session.view == View.RESULTS

        assert session.enter_study().current_index == position

    def test_tab_preserved_across_study_round_trip(self, session, analyze):
        session.submit(analyze)
        session.select_tab(ResultsTab.ROADMAP)

        session.enter_study()
        session.exit_study()

        assert session.active_tab == ResultsTab.ROADMAP

    def test_exit_outside_study_rejected(self, session, analyze):
        session.submit(analyze)

        with pytest.raises(InvalidTransitionError):
            session.exit_study()

    def test_navigation_outside_study_rejected(self, session, analyze):
        session.submit(analyze)

        with pytest.raises(InvalidTransitionError):
            session.next_unit()

    def test_navigation_bounds(self, session, analyze):
        session.submit(analyze)
        session.enter_study()

        session.previous_unit()
        assert session.navigator.current_index == 0

        session.next_unit()
        session.next_unit()
        assert session.navigator.current_index == 1


class TestLifecycle:
    """Test start_over, reset and snapshot"""

    def test_start_over_keeps_documents(self, session, analyze):
        session.submit(analyze)
        session.enter_study()

        session.start_over()

        assert session.view == View.LANDING
        assert session.result is None
        assert session.navigator is None
        assert session.can_submit is True

    def test_reset_discards_everything(self, session, analyze):
        session.submit(analyze)
        old_id = session.session_id

        session.reset()

        assert session.view == View.LANDING
        assert session.result is None
        assert session.intake.is_ready is False
        assert session.session_id != old_id

    def test_snapshot(self, session, analyze):
        session.submit(analyze)
        session.enter_study()
        session.next_unit()

        snapshot = session.snapshot()

        assert snapshot["view"] == "study"
        assert snapshot["active_tab"] == "analysis"
        assert snapshot["study_units"] == 2
        assert snapshot["current_index"] == 1
        assert snapshot["progress"] == 100.0
        assert snapshot["session_id"] == session.session_id
