"""Document intake for the user resume and the target profile."""

from one_path.intake.document_intake import (
    DocumentIntake,
    DocumentPayload,
    DocumentRole,
    load_document,
)

__all__ = [
    "DocumentIntake",
    "DocumentPayload",
    "DocumentRole",
    "load_document",
]
