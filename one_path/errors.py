"""
Error types for One Path.

Analysis errors are user-facing: intake, request and contract failures all
collapse into a single message shown on the current view. Session errors
signal a transition the UI should never have offered.
"""


class OnePathError(Exception):
    """Base class for all One Path errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AnalysisError(OnePathError):
    """A submission could not produce an AnalysisResult."""


class IntakeError(AnalysisError):
    """A document could not be read or is not acceptable."""


class EngineRequestError(AnalysisError):
    """The call to the analysis engine was rejected."""


class ContractViolationError(AnalysisError):
    """The engine replied, but the reply is not valid JSON or breaks the schema."""


class SessionError(OnePathError):
    """Base class for illegal session operations."""


class InvalidTransitionError(SessionError):
    """The requested view transition is not legal from the current view."""


class StudyUnavailableError(SessionError):
    """There are no study units to navigate."""


class SubmissionInProgressError(SessionError):
    """A submission was attempted while another one is still outstanding."""
