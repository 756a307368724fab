"""OpenAI-compatible Chat Completion Client

Works against OpenAI itself and any endpoint speaking the same API
(Gemini's OpenAI-compatible endpoint included).
"""

import openai
from openai import OpenAI

from aicommit.llm.base import LLMClient, LLMResponse, GenerationError


class OpenAIClient(LLMClient):
    """Chat completions via the OpenAI SDK."""

    TEMPERATURE = 0.4
    # Failures surface immediately; re-running is the user's call
    MAX_RETRIES = 0

    def __init__(self, api_key: str, model: str, base_url: str | None = None, provider: str = "openai"):
        self.model = model
        self.provider = provider
        self._client = OpenAI(api_key=api_key, base_url=base_url, max_retries=self.MAX_RETRIES)

    @property
    def name(self) -> str:
        return f"{self.provider.capitalize()} ({self.model})"

    def complete(self, system: str, user: str) -> LLMResponse:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                temperature=self.TEMPERATURE,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except openai.AuthenticationError:
            raise GenerationError(f"Invalid API key for {self.provider}. Check your environment.")
        except openai.RateLimitError:
            raise GenerationError(f"Rate limited by {self.provider}. Wait a moment and try again.")
        except openai.APIConnectionError as e:
            raise GenerationError(f"Could not reach {self.provider}: {e}")
        except openai.APIStatusError as e:
            raise GenerationError(f"{self.provider} API error ({e.status_code}): {e.message}")
        except openai.APIError as e:
            raise GenerationError(f"{self.provider} API error: {e.message}")

        if not response.choices or not response.choices[0].message.content:
            raise GenerationError(f"Invalid response from {self.provider}. No content returned.")

        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=response.choices[0].message.content.strip(),
            model=getattr(response, "model", None) or self.model,
            tokens_used=usage.total_tokens if usage else 0,
        )
