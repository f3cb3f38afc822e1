"""
Linear navigation over the flattened study units.
"""
from typing import Sequence

from one_path.errors import StudyUnavailableError
from one_path.roadmap.flatten import StudyUnit
from one_path.study.messages import PeerCue, peer_cue


class StudyNavigator:
    """
    Tracks the current position in a non-empty sequence of study units.

    Moving past either end is a no-op rather than an error, so the index
    always stays within [0, total - 1].
    """

    def __init__(self, units: Sequence[StudyUnit]):
        if not units:
            raise StudyUnavailableError("There are no roadmap topics to study.")
        self._units = tuple(units)
        self._index = 0

    @property
    def units(self) -> Sequence[StudyUnit]:
        return self._units

    @property
    def total(self) -> int:
        return len(self._units)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def last_index(self) -> int:
        return len(self._units) - 1

    @property
    def current_unit(self) -> StudyUnit:
        return self._units[self._index]

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == self.last_index

    def next(self) -> StudyUnit:
        if self._index < self.last_index:
            self._index += 1
        return self.current_unit

    def previous(self) -> StudyUnit:
        if self._index > 0:
            self._index -= 1
        return self.current_unit

    def progress(self) -> float:
        """Percentage of the roadmap reached, counting the current unit; 100.0 at the last unit."""
        return (self._index + 1) / self.total * 100

    def position_label(self) -> str:
        return f"{self._index + 1} / {self.total}"

    def peer_cue(self) -> PeerCue:
        return peer_cue(self._index)
