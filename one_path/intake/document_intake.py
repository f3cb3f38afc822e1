"""
Document intake: turn a user-selected file into an inline request payload.

Two independent slots are held, one for the user's resume and one for the
target profile. Both must be filled before an analysis can be requested.
"""
import base64
import logging
import mimetypes
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from one_path.errors import IntakeError

logger = logging.getLogger(__name__)

# mimetypes does not know .md on every platform
mimetypes.add_type("text/markdown", ".md")

DEFAULT_MAX_DOCUMENT_BYTES = 20 * 1024 * 1024


class DocumentRole(str, Enum):
    USER = "user"
    TARGET = "target"


class DocumentPayload(BaseModel):
    """An encoded document ready to be inlined in the analysis request."""
    model_config = ConfigDict(frozen=True)

    role: DocumentRole
    filename: str
    mime_type: str
    data: str  # base64
    size_bytes: int


def detect_media_type(path: Path) -> Optional[str]:
    """Media type declared by the file itself (its name), not chosen by the user."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type


def load_document(path: Union[str, Path], role: DocumentRole, config=None) -> DocumentPayload:
    """
    Read a file and encode it as a request payload.

    Args:
        path: Path of the chosen file
        role: Which slot the document is for
        config: Configuration object (MAX_DOCUMENT_BYTES, ALLOWED_MEDIA_TYPES)

    Returns:
        DocumentPayload with base64 data and the detected media type

    Raises:
        IntakeError: the file is missing, unreadable, empty, too large or of
            an unsupported media type
    """
    if not path:
        raise IntakeError(f"No {role.value} document was selected.")

    path = Path(path)
    max_bytes = getattr(config, "MAX_DOCUMENT_BYTES", DEFAULT_MAX_DOCUMENT_BYTES)
    allowed_types = getattr(config, "ALLOWED_MEDIA_TYPES", None)

    mime_type = detect_media_type(path)
    if not mime_type:
        raise IntakeError(f"Could not determine the file type of '{path.name}'.")
    if allowed_types and mime_type not in allowed_types:
        raise IntakeError(
            f"'{path.name}' is a {mime_type} file; supported types are: {', '.join(allowed_types)}."
        )

    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning("Failed to read %s document %s: %s", role.value, path, e)
        raise IntakeError(f"Could not read '{path.name}': {e.strerror or e}") from e

    if not raw:
        raise IntakeError(f"'{path.name}' is empty.")
    if len(raw) > max_bytes:
        raise IntakeError(
            f"'{path.name}' is {len(raw) / (1024 * 1024):.1f} MB; the limit is "
            f"{max_bytes / (1024 * 1024):.1f} MB."
        )

    logger.info("Loaded %s document %s (%s, %d bytes)", role.value, path.name, mime_type, len(raw))
    return DocumentPayload(
        role=role,
        filename=path.name,
        mime_type=mime_type,
        data=base64.b64encode(raw).decode("ascii"),
        size_bytes=len(raw),
    )


class DocumentIntake:
    """Holds the user and target documents for one session."""

    def __init__(self, config=None):
        self.config = config
        self._documents: Dict[DocumentRole, DocumentPayload] = {}

    def set(self, role: DocumentRole, path: Union[str, Path]) -> DocumentPayload:
        """
        Load a document into its slot.

        The slot is emptied before loading, so a rejected file never leaves
        the previous document in place to be analysed instead.
        """
        self._documents.pop(role, None)
        payload = load_document(path, role, self.config)
        self._documents[role] = payload
        return payload

    def get(self, role: DocumentRole) -> Optional[DocumentPayload]:
        return self._documents.get(role)

    def clear(self, role: Optional[DocumentRole] = None):
        if role is None:
            self._documents.clear()
        else:
            self._documents.pop(role, None)

    @property
    def user(self) -> Optional[DocumentPayload]:
        return self.get(DocumentRole.USER)

    @property
    def target(self) -> Optional[DocumentPayload]:
        return self.get(DocumentRole.TARGET)

    @property
    def is_ready(self) -> bool:
        return self.user is not None and self.target is not None
