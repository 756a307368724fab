"""Commit Orchestrator

Runs the whole commit flow against injected collaborators:

    stage (optional) -> status checks -> generate/confirm loop -> commit

The orchestrator does no terminal I/O itself. Progress is reported through a
``Reporter`` so the CLI can draw spinners and status lines while tests run
silently.
"""

from contextlib import nullcontext
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ContextManager, Optional, Protocol

from aicommit.git import RepositoryStatus


class CommitOutcome(Enum):
    NO_CHANGES = "no_changes"
    NOTHING_STAGED = "nothing_staged"
    COMMITTED = "committed"


class LoopState(Enum):
    GENERATING = "generating"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    ACCEPTED = "accepted"
    ABORTED = "aborted"


@dataclass
class CommitResult:
    outcome: CommitOutcome
    message: Optional[str] = None
    attempts: int = 0


class Repository(Protocol):
    def stage_all(self) -> None: ...
    def get_status(self) -> RepositoryStatus: ...
    def get_staged_diff(self) -> str: ...
    def commit(self, message: str) -> None: ...


class Generator(Protocol):
    def generate(self, diff_text: str) -> str: ...


class Reporter:
    """Presentation hooks. The base class reports nothing."""

    def staging(self) -> None:
        pass

    def status(self, status: RepositoryStatus) -> None:
        pass

    def generating(self, diff_text: str) -> ContextManager:
        return nullcontext()

    def regenerating(self) -> None:
        pass


class CommitOrchestrator:
    """Owns the staging decision, the generate/confirm loop and the final commit."""

    def __init__(
        self,
        repository: Repository,
        generator: Generator,
        confirm: Callable[[str], bool],
        reporter: Optional[Reporter] = None,
    ):
        self.repository = repository
        self.generator = generator
        self.confirm = confirm
        self.reporter = reporter or Reporter()
        self.state = LoopState.GENERATING

    def run(self, stage_all: bool = False) -> CommitResult:
        if stage_all:
            self.reporter.staging()
            self.repository.stage_all()

        status = self.repository.get_status()
        if not status.has_changes:
            return CommitResult(CommitOutcome.NO_CHANGES)
        if not status.has_staged and not stage_all:
            return CommitResult(CommitOutcome.NOTHING_STAGED)

        self.reporter.status(status)
        message, attempts = self._generate_until_accepted()

        self.repository.commit(message)
        return CommitResult(CommitOutcome.COMMITTED, message=message, attempts=attempts)

    def _generate_until_accepted(self) -> tuple[str, int]:
        """Generate candidates until one is confirmed. No attempt cap.

        Generation and prompt errors end the loop in ABORTED and propagate.
        """
        self.state = LoopState.GENERATING
        candidate = None
        attempts = 0

        while self.state not in (LoopState.ACCEPTED, LoopState.ABORTED):
            try:
                if self.state is LoopState.GENERATING:
                    # Always a fresh diff, never the previous candidate's
                    diff_text = self.repository.get_staged_diff()
                    attempts += 1
                    with self.reporter.generating(diff_text):
                        candidate = self.generator.generate(diff_text)
                    self.state = LoopState.AWAITING_CONFIRMATION
                else:
                    if self.confirm(candidate):
                        self.state = LoopState.ACCEPTED
                    else:
                        candidate = None
                        self.reporter.regenerating()
                        self.state = LoopState.GENERATING
            except Exception:
                self.state = LoopState.ABORTED
                raise

        return candidate, attempts
