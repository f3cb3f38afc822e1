"""
Pydantic models for the analysis reply.

Provides type-safe models for the resume comparison (sections and items) and
for the learning roadmap hierarchy (skill, phase, subject, topic, resource).
"""
import logging
from enum import Enum
from typing import Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator

from one_path.roadmap.video import extract_video_id

logger = logging.getLogger(__name__)

VIDEO_RESOURCE_TYPE = "Video"


class ItemCategory(str, Enum):
    """Display category of a single comparison item."""
    GAP = "gap"
    IMPROVEMENT = "improvement"
    ON_TRACK = "on_track"


def infer_category(analysis_text: str) -> ItemCategory:
    """Fallback categorisation from the reserved markers in the analysis prose."""
    if "Gap" in analysis_text or "Missing" in analysis_text:
        return ItemCategory.GAP
    if "Improvement" in analysis_text:
        return ItemCategory.IMPROVEMENT
    return ItemCategory.ON_TRACK


class WireModel(BaseModel):
    """Base for models parsed from the engine reply. Read-only once built."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class AnalysisItem(WireModel):
    """One compared item: what the user has, what the target has, and the verdict."""
    you: str
    target: str
    analysis: str
    category: Optional[ItemCategory] = None

    @property
    def resolved_category(self) -> ItemCategory:
        """Explicit category when the engine sent one, marker inference otherwise."""
        if self.category is not None:
            return self.category
        return infer_category(self.analysis)


class AnalysisSection(WireModel):
    """One comparable dimension of the two documents (e.g. "Experience")."""
    title: str
    items: Dict[str, AnalysisItem]

    @field_validator("items", mode="before")
    @classmethod
    def _normalize_labels(cls, value):
        if not isinstance(value, dict):
            return value
        normalized = {}
        for label, item in value.items():
            key = label.strip() if isinstance(label, str) else label
            if not key:
                raise ValueError("item labels must not be blank")
            if key in normalized:
                raise ValueError(f"duplicate item label: {key!r}")
            normalized[key] = item
        return normalized


class Resource(WireModel):
    """A learning resource attached to a topic."""
    type: str
    title: str
    url: str

    @field_validator("url")
    @classmethod
    def _require_absolute_url(cls, value: str) -> str:
        value = value.strip()
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"resource url must be an absolute http(s) URL: {value!r}")
        return value

    @property
    def video_id(self) -> Optional[str]:
        """Embeddable video ID, or None when this resource renders as a plain link."""
        if self.type != VIDEO_RESOURCE_TYPE:
            return None
        return extract_video_id(self.url)

    @property
    def is_embeddable_video(self) -> bool:
        return self.video_id is not None


class Topic(WireModel):
    """Atomic learning unit inside a subject."""
    topic_name: str
    resources: List[Resource]


class Subject(WireModel):
    subject_name: str
    topics: List[Topic]


class Phase(WireModel):
    """Learning phase (Beginner, Intermediate, Advanced). Engine order is trusted."""
    phase_name: str
    subjects: List[Subject]


class Roadmap(WireModel):
    """Ordered phases that close one identified skill gap."""
    skill: str
    phases: List[Phase]


class AnalysisResult(WireModel):
    """Root object returned by the analysis engine."""
    analysis: List[AnalysisSection]
    roadmaps: List[Roadmap]

    @property
    def has_study_units(self) -> bool:
        return any(
            subject.topics
            for roadmap in self.roadmaps
            for phase in roadmap.phases
            for subject in phase.subjects
        )

    def resource_warnings(self) -> List[str]:
        """
        List topics that fall short of the expected resource mix.

        Every topic is expected to carry at least two resources of differing
        types. This is advisory only and never rejects a reply.
        """
        warnings = []
        for roadmap in self.roadmaps:
            for phase in roadmap.phases:
                for subject in phase.subjects:
                    for topic in subject.topics:
                        types = {r.type.strip().lower() for r in topic.resources}
                        if len(topic.resources) < 2 or len(types) < 2:
                            warnings.append(
                                f"{roadmap.skill} / {subject.subject_name} / {topic.topic_name}: "
                                f"{len(topic.resources)} resource(s), {len(types)} type(s)"
                            )
        return warnings
