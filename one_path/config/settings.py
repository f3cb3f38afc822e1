"""
Configuration for One Path.

Supports both local development (environment variables) and GCP production (Secret Manager).

Usage:
    from one_path.config import settings as config
    # All config values are available as config.GOOGLE_API_KEY, etc.
"""
import os
from typing import Optional

from dotenv import load_dotenv

# Must run before any os.getenv() calls below
load_dotenv()


def is_gcp_environment() -> bool:
    """Check if running on GCP."""
    return (
        os.getenv("GAE_ENV") is not None or  # App Engine
        os.getenv("K_SERVICE") is not None or  # Cloud Run
        os.getenv("GOOGLE_CLOUD_PROJECT") is not None  # Any GCP service
    )


def get_secret(secret_id: str, project_id: Optional[str] = None) -> Optional[str]:
    """
    Get secret from environment variable (local) or Google Secret Manager (production).

    Priority:
    1. Environment variable (highest priority - works everywhere)
    2. Secret Manager (if on GCP and env var not set)
    3. None (if neither available)

    Args:
        secret_id: Secret name in Secret Manager or env var name
        project_id: GCP project ID (auto-detected if None)

    Returns:
        Secret value or None if not found
    """
    env_value = os.getenv(secret_id)
    if env_value:
        return env_value

    if not is_gcp_environment():
        return None

    try:
        from google.cloud import secretmanager
    except ImportError:
        # Installed with the "gcp" extra only
        return None

    project_id = project_id or os.getenv("GOOGLE_CLOUD_PROJECT")
    if not project_id:
        print(f"⚠ Warning: GOOGLE_CLOUD_PROJECT not set, cannot fetch secret {secret_id}")
        return None

    try:
        client = secretmanager.SecretManagerServiceClient()
        name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
        response = client.access_secret_version(request={"name": name})
        print(f"✓ Loaded secret {secret_id} from Secret Manager")
        return response.payload.data.decode("UTF-8")
    except Exception as e:
        # Secret not found or permission denied
        print(f"⚠ Warning: Could not fetch secret {secret_id} from Secret Manager: {e}")
        return None


# --- Model Configuration ---
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "google")
LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.0-flash")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0"))

# --- Document Intake Configuration ---
# Gemini rejects inline request payloads above ~20 MB
MAX_DOCUMENT_BYTES = int(os.getenv("MAX_DOCUMENT_BYTES", str(20 * 1024 * 1024)))
_allowed_media_types = os.getenv(
    "ALLOWED_MEDIA_TYPES",
    "application/pdf,text/plain,text/markdown,image/png,image/jpeg,image/webp",
)
ALLOWED_MEDIA_TYPES = [t.strip() for t in _allowed_media_types.split(",") if t.strip()]

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Server Configuration ---
GRADIO_SERVER_NAME = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
GRADIO_SERVER_PORT = int(os.getenv("GRADIO_SERVER_PORT", "7860"))

# --- API Keys (from Secret Manager or env vars) ---
GOOGLE_API_KEY = get_secret("GOOGLE_API_KEY")
