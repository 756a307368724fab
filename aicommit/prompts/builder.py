"""Prompt Builder - Construct the user prompt sent alongside the staged diff."""

from dataclasses import dataclass

from aicommit import COMMIT_TYPES


@dataclass
class PromptConfig:
    """User-provided context that shapes the prompt."""
    hint: str | None = None
    forced_type: str | None = None


class PromptBuilder:
    """Embeds the diff verbatim, plus any optional hints from the command line."""

    def build(self, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            "Generate a Git commit message for the following changes:",
            diff,
            self._build_hints_section(config),
        ]
        return "\n\n".join(s for s in sections if s)

    def _build_hints_section(self, config: PromptConfig) -> str:
        lines = []
        if config.forced_type:
            description = COMMIT_TYPES.get(config.forced_type, "")
            suffix = f" ({description.lower()})" if description else ""
            lines.append(f"Use type '{config.forced_type}'{suffix}.")
        if config.hint:
            lines.append(f"<context>\n{config.hint}\n</context>")
        return "\n".join(lines)
