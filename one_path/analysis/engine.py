"""
Analysis engine client.

Sends the fixed analysis instruction and the two documents to the LLM in a
single request, constrained to JSON matching the AnalysisResult schema, and
returns the validated result.
"""
import logging
from typing import Any, Dict, List, Optional

from langchain_core.messages import HumanMessage

from one_path.analysis.parsers import parse_analysis_reply
from one_path.analysis.prompts import ANALYSIS_PROMPT, RESPONSE_SCHEMA
from one_path.analysis.schemas import AnalysisResult
from one_path.core.llm_utils import extract_content_as_string
from one_path.errors import ContractViolationError, EngineRequestError, IntakeError
from one_path.intake.document_intake import DocumentPayload

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """
    Compares a user's resume with a target profile using an LLM.

    Each call to analyze() issues exactly one request. There is no retry and
    no caching: every submission is a fresh, independent call.
    """

    def __init__(self, llm, config):
        """
        Initialize Analysis Engine.

        Args:
            llm: LangChain chat model instance
            config: Configuration object
        """
        self.llm = llm
        self.config = config

    def build_message(
        self,
        user_payload: DocumentPayload,
        target_payload: DocumentPayload
    ) -> HumanMessage:
        """Build the single request message: instruction first, then user and target documents."""
        content: List[Dict[str, Any]] = [
            {"type": "text", "text": ANALYSIS_PROMPT},
            {"type": "media", "mime_type": user_payload.mime_type, "data": user_payload.data},
            {"type": "media", "mime_type": target_payload.mime_type, "data": target_payload.data},
        ]
        # Gemini requires at least one non-system message, so everything goes in one HumanMessage
        return HumanMessage(content=content)

    def _structured_llm(self):
        """Bind the JSON response directive for providers that support it."""
        provider = getattr(self.config, 'LLM_PROVIDER', 'google').lower()
        if provider == 'google':
            return self.llm.bind(
                response_mime_type="application/json",
                response_schema=RESPONSE_SCHEMA
            )
        return self.llm

    def analyze(
        self,
        user_payload: Optional[DocumentPayload],
        target_payload: Optional[DocumentPayload]
    ) -> AnalysisResult:
        """
        Run the analysis for one document pair.

        Args:
            user_payload: The user's resume
            target_payload: The target resume or profile

        Returns:
            The validated AnalysisResult

        Raises:
            IntakeError: a payload is missing or empty
            EngineRequestError: the engine call was rejected
            ContractViolationError: the reply is not valid JSON or breaks the schema
        """
        for label, payload in (("your resume", user_payload), ("the target profile", target_payload)):
            if payload is None or not payload.data:
                raise IntakeError(f"Please upload {label} before running the analysis.")

        message = self.build_message(user_payload, target_payload)
        logger.info(
            "Requesting analysis: %s (%s) vs %s (%s)",
            user_payload.filename, user_payload.mime_type,
            target_payload.filename, target_payload.mime_type,
        )

        try:
            response = self._structured_llm().invoke([message])
        except Exception as e:
            logger.error(f"Analysis request failed: {e}")
            raise EngineRequestError(f"The analysis request failed: {e}") from e

        reply_text = extract_content_as_string(response)
        try:
            result = parse_analysis_reply(reply_text)
        except ContractViolationError as e:
            logger.warning(f"Rejected analysis reply: {e.message}")
            raise

        for warning in result.resource_warnings():
            logger.warning(f"Topic below expected resource mix: {warning}")

        logger.info(
            "Analysis complete: %d section(s), %d roadmap(s)",
            len(result.analysis), len(result.roadmaps),
        )
        return result
