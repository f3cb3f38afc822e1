"""
Shared LLM utilities: model construction and response content extraction.

Handles various LLM response formats (especially Google Gemini).
"""
import logging

from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


def create_llm(config) -> BaseChatModel:
    """Create LLM instance based on configured provider."""
    provider = getattr(config, 'LLM_PROVIDER', 'google').lower()
    temperature = getattr(config, 'LLM_TEMPERATURE', 0)

    if provider == 'google':
        from langchain_google_genai import ChatGoogleGenerativeAI

        api_key = getattr(config, 'GOOGLE_API_KEY', None)
        if not api_key:
            raise ValueError(
                "GOOGLE_API_KEY not set. Please set it as environment variable "
                "or in .env. Get your key from: https://aistudio.google.com/app/apikey"
            )

        model_name = getattr(config, 'LLM_MODEL', 'gemini-2.0-flash')
        logger.info("Using Google Gemini API: %s", model_name)
        return ChatGoogleGenerativeAI(
            model=model_name,
            temperature=temperature,
            google_api_key=api_key
        )
    elif provider == 'ollama':
        from langchain_ollama import ChatOllama

        model_name = getattr(config, 'LLM_MODEL', 'qwen3:4b-instruct-2507-q4_K_M')
        logger.info("Using Ollama: %s", model_name)
        return ChatOllama(model=model_name, temperature=temperature, format="json")

    raise ValueError(f"Unsupported LLM_PROVIDER: {provider!r} (expected 'google' or 'ollama')")


def extract_content_as_string(response) -> str:
    """
    Safely extract content from LLM response as a string.

    Handles cases where response.content might be:
    - A string (most common)
    - A list of content blocks (e.g., Google Gemini returns [{'type': 'text', 'text': '...'}])
    - A dict content block
    - A response object with .content attribute

    Args:
        response: LLM response object or content

    Returns:
        Content as a plain string
    """
    if hasattr(response, 'content'):
        content = response.content
    else:
        content = response

    return normalize_content_to_string(content)


def normalize_content_to_string(content) -> str:
    """
    Normalize any content type to a plain string.

    Text blocks are joined without a separator so that JSON split across
    several Gemini parts reassembles exactly.
    """
    if isinstance(content, str):
        return content
    elif isinstance(content, list):
        text_parts = []
        for item in content:
            if isinstance(item, dict):
                if 'text' in item:
                    text_parts.append(item['text'])
                elif 'content' in item:
                    text_parts.append(item['content'])
            elif isinstance(item, str):
                text_parts.append(item)
            elif item is not None:
                text_parts.append(str(item))
        return "".join(text_parts)
    elif isinstance(content, dict):
        if 'text' in content:
            return content['text']
        elif 'content' in content:
            return content['content']
        else:
            return str(content)
    else:
        return str(content) if content else ""
