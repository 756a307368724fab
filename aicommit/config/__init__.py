"""Configuration Package

Settings come from the environment only. The nearest ``.env`` file above the
current directory is loaded first but never overrides variables already set.

Provider selection (first match wins):

1. GEMINI_API_KEY -> Gemini's OpenAI-compatible endpoint
2. OPENAI_API_KEY -> OpenAI's default endpoint

AI_COMMIT_MODEL overrides the provider's default model.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

MODEL_ENV_VAR = "AI_COMMIT_MODEL"


class ConfigError(Exception):
    """Raised when required settings are missing."""
    pass


@dataclass(frozen=True)
class Provider:
    """A chat-completion backend reachable through the OpenAI SDK."""
    name: str
    key_var: str
    base_url: Optional[str]
    default_model: str


GEMINI = Provider(
    name="gemini",
    key_var="GEMINI_API_KEY",
    base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
    default_model="gemini-2.0-flash",
)

OPENAI = Provider(
    name="openai",
    key_var="OPENAI_API_KEY",
    base_url=None,  # SDK default
    default_model="gpt-4o-mini",
)

# Priority order for key detection
PROVIDERS = (GEMINI, OPENAI)


@dataclass
class Config:
    """Resolved runtime settings."""
    provider: str
    api_key: str
    model: str
    base_url: Optional[str] = None
    model_overridden: bool = False

    @property
    def masked_key(self) -> str:
        if len(self.api_key) <= 8:
            return "*" * len(self.api_key)
        return f"{self.api_key[:4]}...{self.api_key[-4:]}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """Pick the provider from whichever API key is set.

        Empty values count as unset.
        """
        env = os.environ if environ is None else environ
        override = (env.get(MODEL_ENV_VAR) or "").strip()

        for provider in PROVIDERS:
            api_key = (env.get(provider.key_var) or "").strip()
            if not api_key:
                continue
            return cls(
                provider=provider.name,
                api_key=api_key,
                model=override or provider.default_model,
                base_url=provider.base_url,
                model_overridden=bool(override),
            )

        raise ConfigError(
            f"Neither {GEMINI.key_var} nor {OPENAI.key_var} is set.\n"
            "Add one to your environment or a .env file:\n"
            f"  export {GEMINI.key_var}='your-key-here'"
        )


def load_config(environ: Optional[Mapping[str, str]] = None, use_dotenv: bool = True) -> Config:
    """Load .env (if present) and resolve the config from the environment."""
    if use_dotenv and environ is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Config.from_env(environ)


__all__ = [
    "Config",
    "ConfigError",
    "Provider",
    "PROVIDERS",
    "GEMINI",
    "OPENAI",
    "MODEL_ENV_VAR",
    "load_config",
]
