"""LLM Client Package"""

from aicommit.config import Config
from aicommit.llm.base import LLMClient, LLMResponse, GenerationError, SYSTEM_PROMPT
from aicommit.llm.generator import MessageGenerator, clean_commit_message, TYPES_PATTERN
from aicommit.llm.openai_compat import OpenAIClient


def get_client(config: Config) -> LLMClient:
    """Build the chat client for whichever provider the config selected."""
    return OpenAIClient(
        api_key=config.api_key,
        model=config.model,
        base_url=config.base_url,
        provider=config.provider,
    )


__all__ = [
    "LLMClient",
    "LLMResponse",
    "GenerationError",
    "OpenAIClient",
    "MessageGenerator",
    "get_client",
    "clean_commit_message",
    "SYSTEM_PROMPT",
    "TYPES_PATTERN",
]
