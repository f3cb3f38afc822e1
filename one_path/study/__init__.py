"""Guided study mode: navigation over roadmap topics and coaching messages."""

from one_path.study.navigator import StudyNavigator
from one_path.study.messages import CLASSMATES, PeerCue, guide_message, peer_cue

__all__ = [
    "StudyNavigator",
    "CLASSMATES",
    "PeerCue",
    "guide_message",
    "peer_cue",
]
