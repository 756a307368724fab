"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from aicommit import COMMIT_TYPES

_TYPE_LINES = "\n".join(f"  - {name}: {description}" for name, description in COMMIT_TYPES.items())

SYSTEM_PROMPT = f"""You are a helpful assistant that writes concise, standardized git commit messages.

Follow these rules:
- Use the Conventional Commits format: type(scope): description
- Types:
{_TYPE_LINES}
- Scope is optional but should name the affected part of the codebase in one word.
- The description is written in the imperative mood, lowercase, without a trailing period.
- Example: feat(auth): add login functionality

Reply with the commit message only. Keep it brief!"""


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class GenerationError(Exception):
    """Raised when a commit message cannot be generated."""
    pass


class LLMClient(ABC):
    """Abstract base for chat-completion clients."""

    @abstractmethod
    def complete(self, system: str, user: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
