"""
Pytest configuration and fixtures
"""
import base64
import copy
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


SAMPLE_REPLY = {
    "analysis": [
        {
            "title": "Skills",
            "items": {
                "Python": {
                    "you": "3 years of Python scripting",
                    "target": "Python for production services",
                    "analysis": "Improvement: move from scripts to packaged services.",
                    "category": "improvement"
                },
                "Kubernetes": {
                    "you": "Not mentioned",
                    "target": "Operates Kubernetes clusters",
                    "analysis": "Gap: no container orchestration experience."
                }
            }
        }
    ],
    "roadmaps": [
        {
            "skill": "Kubernetes",
            "phases": [
                {
                    "phase_name": "Beginner",
                    "subjects": [
                        {
                            "subject_name": "Container Basics",
                            "topics": [
                                {
                                    "topic_name": "What is a container",
                                    "resources": [
                                        {"type": "Video", "title": "Containers in 100 seconds",
                                         "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"},
                                        {"type": "Article", "title": "Docker overview",
                                         "url": "https://docs.docker.com/get-started/overview/"}
                                    ]
                                },
                                {
                                    "topic_name": "Pods",
                                    "resources": [
                                        {"type": "Video", "title": "Pods explained",
                                         "url": "https://youtu.be/aBcDeFgHiJk"},
                                        {"type": "Official Docs", "title": "Pods",
                                         "url": "https://kubernetes.io/docs/concepts/workloads/pods/"}
                                    ]
                                }
                            ]
                        }
                    ]
                }
            ]
        }
    ]
}


@pytest.fixture
def sample_reply():
    """A schema-conformant engine reply: one roadmap, one phase, one subject, two topics."""
    return copy.deepcopy(SAMPLE_REPLY)


@pytest.fixture
def sample_reply_text(sample_reply):
    return json.dumps(sample_reply)


@pytest.fixture
def mock_config():
    """Create a mock config object"""
    from unittest.mock import Mock
    config = Mock()

    config.LLM_PROVIDER = "google"
    config.LLM_MODEL = "gemini-2.0-flash"
    config.LLM_TEMPERATURE = 0
    config.GOOGLE_API_KEY = None
    config.MAX_DOCUMENT_BYTES = 1024 * 1024
    config.ALLOWED_MEDIA_TYPES = ["application/pdf", "text/plain", "text/markdown"]

    return config


@pytest.fixture
def mock_llm(sample_reply_text):
    """Create a mock LLM whose bound model replies with the sample JSON"""
    from unittest.mock import MagicMock
    from langchain_core.messages import AIMessage

    llm = MagicMock()
    llm.bind.return_value = llm
    llm.invoke.return_value = AIMessage(content=sample_reply_text)
    return llm


@pytest.fixture
def make_payload():
    """Factory for DocumentPayload objects without touching the filesystem"""
    from one_path.intake.document_intake import DocumentPayload, DocumentRole

    def _make(role=DocumentRole.USER, text="resume text", filename=None, mime_type="text/plain"):
        raw = text.encode("utf-8")
        return DocumentPayload(
            role=role,
            filename=filename or f"{role.value}.txt",
            mime_type=mime_type,
            data=base64.b64encode(raw).decode("ascii"),
            size_bytes=len(raw),
        )
    return _make


@pytest.fixture
def resume_files(tmp_path):
    """Two small text documents on disk"""
    user = tmp_path / "my_resume.txt"
    user.write_text("Jane Doe\nPython developer", encoding="utf-8")
    target = tmp_path / "target_profile.md"
    target.write_text("# Platform Engineer\n- Kubernetes\n- Python", encoding="utf-8")
    return user, target
