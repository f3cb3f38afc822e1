"""
Coaching copy for the study view.

Peer cues rotate with the study position (period 3) and are a pure function
of the index, so the same topic always shows the same classmate.
"""
from typing import NamedTuple

from one_path.roadmap.flatten import StudyUnit


class PeerCue(NamedTuple):
    name: str
    message: str


CLASSMATES = (
    PeerCue("Alex", "Oh, cool topic! I was just wondering how this fits into the bigger picture."),
    PeerCue("Ben", "I've heard this part can be tricky. Let's make sure we get the fundamentals down!"),
    PeerCue("Chloe", "Yes! I've been waiting to learn about this. So excited!"),
)

FUTURE_SELF_TITLE = "A message from your future self:"
FUTURE_SELF_MESSAGE = (
    "Every topic you master is a step closer to the career you want. "
    "Keep going, you're building something great."
)


def peer_cue(index: int) -> PeerCue:
    return CLASSMATES[index % len(CLASSMATES)]


def guide_message(unit: StudyUnit) -> str:
    return (
        f"Alright, let's take the next small step on your path! Time to focus on "
        f"**{unit.topic_name}** within {unit.subject_name}. This is a key building block "
        f"for mastering {unit.skill}. No pressure, just focus on understanding the core idea."
    )
