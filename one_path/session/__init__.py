"""Session state machine: landing, results and study views."""

from one_path.session.state import ResultsTab, Session, View

__all__ = ["ResultsTab", "Session", "View"]
