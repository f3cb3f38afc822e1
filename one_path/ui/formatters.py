"""
Utility functions for formatting analysis results and study units for display in Gradio UI.
"""
import html
from typing import List, Sequence

from one_path.analysis.schemas import AnalysisSection, ItemCategory, Resource, Roadmap
from one_path.roadmap.flatten import StudyUnit
from one_path.roadmap.video import embed_url
from one_path.study.messages import FUTURE_SELF_MESSAGE, FUTURE_SELF_TITLE, PeerCue, guide_message

CATEGORY_BADGES = {
    ItemCategory.GAP: "🔴 Gap",
    ItemCategory.IMPROVEMENT: "🟡 Improvement",
    ItemCategory.ON_TRACK: "🟢 On track",
}


def _md_link(title: str, url: str) -> str:
    # Brackets in titles would break the link syntax
    safe_title = title.replace("[", "(").replace("]", ")")
    return f"[{safe_title}]({url})"


def format_analysis_markdown(sections: Sequence[AnalysisSection]) -> str:
    """
    Format the resume comparison as markdown, one heading per section.

    Args:
        sections: Analysis sections in engine order

    Returns:
        Markdown formatted string
    """
    if not sections:
        return "*The analysis did not return any comparable sections.*"

    lines: List[str] = []
    for section in sections:
        lines.append(f"## {section.title}")
        for label, item in section.items.items():
            badge = CATEGORY_BADGES[item.resolved_category]
            lines.append(f"### {label}")
            lines.append(f"- **You:** {item.you}")
            lines.append(f"- **Target:** {item.target}")
            lines.append("")
            lines.append(f"> **{badge}:** {item.analysis}")
            lines.append("")
    return "\n".join(lines).strip()


def format_resource_markdown(resource: Resource) -> str:
    return f"- `{resource.type}` {_md_link(resource.title, resource.url)}"


def format_roadmaps_markdown(roadmaps: Sequence[Roadmap]) -> str:
    """
    Format all roadmaps as nested markdown (skill, phase, subject, topic, resources).

    Args:
        roadmaps: Roadmaps in engine order

    Returns:
        Markdown formatted string
    """
    if not roadmaps:
        return "🎉 *No skill gaps were found, so there is no roadmap to follow.*"

    lines: List[str] = []
    for roadmap in roadmaps:
        lines.append(f"## 🧭 {roadmap.skill}")
        for phase in roadmap.phases:
            lines.append(f"### {phase.phase_name}")
            for subject in phase.subjects:
                lines.append(f"#### {subject.subject_name}")
                for topic in subject.topics:
                    lines.append(f"**{topic.topic_name}**")
                    lines.append("")
                    lines.extend(format_resource_markdown(r) for r in topic.resources)
                    lines.append("")
        lines.append("---")
    return "\n".join(lines).strip()


def format_resource_html(resource: Resource) -> str:
    """A video iframe when the resource is an embeddable video, an outbound link otherwise."""
    title = html.escape(resource.title)
    header = f'<div class="resource-embed-header">{html.escape(resource.type)}: {title}</div>'
    if resource.is_embeddable_video:
        body = (
            '<div class="video-container">'
            f'<iframe src="{embed_url(resource.video_id)}" title="{title}" frameborder="0" '
            'allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture" '
            'allowfullscreen></iframe>'
            '</div>'
        )
    else:
        body = (
            '<div class="resource-link">'
            f'<a href="{html.escape(resource.url, quote=True)}" target="_blank" rel="noopener noreferrer">'
            'Open Article/Blog Post</a>'
            '</div>'
        )
    return f'<div class="resource-embed">{header}{body}</div>'


def format_study_unit_html(unit: StudyUnit) -> str:
    resources = "".join(format_resource_html(r) for r in unit.resources)
    return f'<div class="study-content">{resources}</div>'


def format_guide_markdown(unit: StudyUnit) -> str:
    return f"*{unit.skill} · {unit.phase_name} · {unit.subject_name}*\n\n{guide_message(unit)}"


def format_peer_cue_markdown(cue: PeerCue) -> str:
    return f"**{cue.name}**\n\n{cue.message}"


def format_future_self_markdown() -> str:
    return f"**{FUTURE_SELF_TITLE}**\n\n{FUTURE_SELF_MESSAGE}"


def format_progress_html(percentage: float) -> str:
    """Progress bar for the whole roadmap."""
    width = max(0.0, min(100.0, percentage))
    return (
        '<div class="progress-bar-container">'
        '<div class="progress-bar-label">Total Roadmap Progress</div>'
        '<div class="progress-bar-bg">'
        f'<div class="progress-bar-fg" style="width: {width:.1f}%"></div>'
        '</div>'
        f'<div class="progress-bar-value">{width:.0f}%</div>'
        '</div>'
    )


def format_error_markdown(message: str) -> str:
    if not message:
        return ""
    return f"❌ **Error:** {message}"
