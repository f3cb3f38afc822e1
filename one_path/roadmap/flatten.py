"""
Flatten the roadmap hierarchy into a single ordered list of study units.

The study view walks topics one at a time, so every topic of every roadmap
becomes one StudyUnit carrying its skill, phase and subject context.
"""
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from one_path.analysis.schemas import Resource, Roadmap


class StudyUnit(BaseModel):
    """One navigable topic, derived from the roadmap hierarchy."""
    model_config = ConfigDict(frozen=True)

    topic_name: str
    resources: List[Resource]
    skill: str
    phase_name: str
    subject_name: str
    sequence_index: int


def flatten(roadmaps: Sequence[Roadmap]) -> List[StudyUnit]:
    """
    Depth-first traversal of roadmaps -> phases -> subjects -> topics.

    Source order is preserved at every level and the function has no side
    effects, so flattening the same roadmaps twice yields equal lists.

    Args:
        roadmaps: Roadmaps in the order the engine returned them

    Returns:
        One StudyUnit per topic, indexed from 0
    """
    units = []
    for roadmap in roadmaps:
        for phase in roadmap.phases:
            for subject in phase.subjects:
                for topic in subject.topics:
                    units.append(StudyUnit(
                        topic_name=topic.topic_name,
                        resources=list(topic.resources),
                        skill=roadmap.skill,
                        phase_name=phase.phase_name,
                        subject_name=subject.subject_name,
                        sequence_index=len(units),
                    ))
    return units
