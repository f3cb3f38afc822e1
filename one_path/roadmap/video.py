"""Video-hosting URL helpers for rendering "Video" resources inline."""
import re
from typing import Optional

# watch?v=, &v=, youtu.be/, embed/, v/ and the user-path form u/<x>/
_VIDEO_ID_PATTERN = re.compile(
    r'^.*(?:youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*'
)
_VIDEO_ID_LENGTH = 11
_VALID_VIDEO_ID = re.compile(r'^[A-Za-z0-9_-]{11}$')

EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}"


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract a YouTube video ID from the common URL shapes.

    Returns None when the URL has none of the recognised shapes or the
    captured ID is not an 11 character video ID.
    """
    if not url:
        return None
    match = _VIDEO_ID_PATTERN.match(url.strip())
    if not match:
        return None
    video_id = match.group(1)
    if len(video_id) != _VIDEO_ID_LENGTH or not _VALID_VIDEO_ID.match(video_id):
        return None
    return video_id


def embed_url(video_id: str) -> str:
    return EMBED_URL_TEMPLATE.format(video_id=video_id)
