"""Console progress reporting for the commit flow."""

import time
from contextlib import contextmanager

from aicommit.git import RepositoryStatus
from aicommit.llm import MessageGenerator
from aicommit.orchestrator import Reporter
from aicommit.output import Spinner, bold, dim, print_info, print_warning

MAX_FILES_SHOWN = 8


class ConsoleReporter(Reporter):
    """Draws status lines and a spinner; prints stats when verbose."""

    def __init__(self, client_name: str = "", generator: MessageGenerator | None = None, verbose: bool = False):
        self.client_name = client_name
        self.generator = generator
        self.verbose = verbose

    def staging(self) -> None:
        print_info("Staging all changes...")

    def status(self, status: RepositoryStatus) -> None:
        """Show which files will be committed, collapsing long lists."""
        if not status.staged:
            return
        print(bold("Staged changes:"))
        shown = status.staged[:MAX_FILES_SHOWN]
        for path in shown:
            print(dim(f"  {path}"))
        remaining = len(status.staged) - len(shown)
        if remaining > 0:
            print(dim(f"  ... and {remaining} more files"))

    @contextmanager
    def generating(self, diff_text: str):
        label = "Generating commit message with AI..."
        if self.client_name:
            label = f"Generating commit message with {self.client_name}..."
        start = time.time()
        with Spinner(label):
            yield
        if self.verbose:
            self._print_stats(diff_text, time.time() - start)

    def regenerating(self) -> None:
        print_warning("Regenerating commit message...")

    def _print_stats(self, diff_text: str, elapsed: float) -> None:
        response = self.generator.last_response if self.generator else None
        print(dim(f"  Diff: {len(diff_text)} chars (~{len(diff_text) // 4} tokens)"))
        if response:
            print(dim(f"  Model: {response.model}, {response.tokens_used} tokens"))
        print(dim(f"  Generate: {elapsed:.2f}s"))
