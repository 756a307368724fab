"""Message Generator - turn a staged diff into a candidate commit message."""

import re

from aicommit import COMMIT_TYPE_NAMES
from aicommit.llm.base import LLMClient, LLMResponse, GenerationError, SYSTEM_PROMPT
from aicommit.prompts import PromptBuilder, PromptConfig

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

# Lines that mean the model started echoing the diff or a code block
JUNK_PATTERNS = re.compile(r'^(diff --git |@@\s|[+-]{3}\s[ab]/|index [0-9a-f]|```)')


def clean_commit_message(text: str) -> str:
    """Extract just the commit message from an LLM reply.

    Drops chatty preambles before the first typed subject line and anything
    after it that looks like diff output or a fenced code block.
    """
    lines = text.strip().split('\n')
    start_idx = 0
    for i, line in enumerate(lines):
        if re.match(rf'^[`\s]*({TYPES_PATTERN})[\(!:]', line):
            start_idx = i
            break

    end_idx = len(lines)
    for i in range(start_idx + 1, len(lines)):
        if JUNK_PATTERNS.match(lines[i]):
            end_idx = i
            break

    lines = '\n'.join(lines[start_idx:end_idx]).rstrip().split('\n')
    lines[0] = lines[0].strip('`').strip()
    return '\n'.join(lines).strip()


class MessageGenerator:
    """Produces one candidate message per call. Nothing is cached between calls."""

    def __init__(self, client: LLMClient, prompt_config: PromptConfig | None = None):
        self.client = client
        self.prompt_config = prompt_config or PromptConfig()
        self.builder = PromptBuilder()
        self.last_response: LLMResponse | None = None

    def generate(self, diff_text: str) -> str:
        prompt = self.builder.build(diff_text, self.prompt_config)
        response = self.client.complete(SYSTEM_PROMPT, prompt)
        self.last_response = response

        message = clean_commit_message(response.content)
        if not message:
            raise GenerationError("The model returned an empty commit message.")
        return message
