"""
Strict parsing of the analysis engine reply.

The reply must be a single JSON object matching AnalysisResult. Anything
else is a contract violation; there is no best-effort recovery.
"""
import json
import logging
import re
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from one_path.analysis.schemas import AnalysisResult
from one_path.errors import ContractViolationError

logger = logging.getLogger(__name__)

_CODE_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CODE_FENCE_CLOSE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Removes markdown-style ```json and ``` wrappers from model output."""
    text = _CODE_FENCE_OPEN.sub("", text.strip())
    text = _CODE_FENCE_CLOSE.sub("", text.strip())
    return text.strip()


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ContractViolationError(f"Analysis reply repeats the key {key!r} in one object.")
        obj[key] = value
    return obj


def load_json_object(text: str) -> Dict[str, Any]:
    """
    Parse text as exactly one JSON object.

    Raises:
        ContractViolationError: empty text, invalid JSON, duplicate keys or a
            non-object root
    """
    cleaned = strip_code_fences(text or "")
    if not cleaned:
        raise ContractViolationError("The analysis engine returned an empty reply.")

    try:
        parsed = json.loads(cleaned, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise ContractViolationError(
            f"The analysis engine returned invalid JSON ({e.msg} at line {e.lineno}, column {e.colno})."
        ) from e

    if not isinstance(parsed, dict):
        raise ContractViolationError(
            f"The analysis engine returned a JSON {type(parsed).__name__}, expected an object."
        )
    return parsed


def _describe_validation_error(error: ValidationError, limit: int = 3) -> str:
    details = []
    for item in error.errors()[:limit]:
        location = ".".join(str(part) for part in item.get("loc", ())) or "<root>"
        details.append(f"{location}: {item.get('msg', 'invalid')}")
    remaining = error.error_count() - len(details)
    if remaining > 0:
        details.append(f"and {remaining} more")
    return "; ".join(details)


def parse_analysis_reply(text: str) -> AnalysisResult:
    """
    Parse and validate the raw engine reply.

    Args:
        text: Reply text as returned by the model

    Returns:
        A fully validated AnalysisResult

    Raises:
        ContractViolationError: the reply does not parse or does not satisfy
            the response schema
    """
    payload = load_json_object(text)
    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        raise ContractViolationError(
            f"The analysis reply does not match the expected structure: {_describe_validation_error(e)}"
        ) from e
