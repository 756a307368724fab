"""Git Repository - the version-control operations the commit flow needs."""

import subprocess
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RepositoryStatus:
    """Changed paths, split by whether they are staged for the next commit."""
    staged: list[str] = field(default_factory=list)
    unstaged: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.staged or self.unstaged)

    @property
    def has_staged(self) -> bool:
        return bool(self.staged)


class RepositoryError(Exception):
    """Raised when git operations fail."""
    pass


def parse_porcelain(output: str) -> RepositoryStatus:
    """Parse 'git status --porcelain=v1 -z' output.

    Each entry is 'XY path'. X is the index (staged) state, Y the work tree
    state. Renames and copies are followed by an extra entry holding the
    original path.
    """
    status = RepositoryStatus()
    entries = output.split('\0')
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 4:
            continue

        index_state, tree_state, path = entry[0], entry[1], entry[3:]
        if index_state in 'RC':
            i += 1  # skip original path

        if index_state == '?':
            status.unstaged.append(path)
            continue
        if index_state not in (' ', '!'):
            status.staged.append(path)
        if tree_state not in (' ', '!'):
            status.unstaged.append(path)

    return status


class GitRepository:
    """Thin wrapper over the git CLI for the current working tree."""

    def __init__(self, cwd: Optional[str] = None):
        self.cwd = cwd
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str, input: Optional[str] = None) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                input=input,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or e.stdout or '').strip()
            raise RepositoryError(f"Git command failed: git {' '.join(args)}\n{detail}")
        except FileNotFoundError:
            raise RepositoryError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except RepositoryError:
            raise RepositoryError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not inside a work tree."""
        try:
            self._run_git('rev-parse', '--is-inside-work-tree')
        except RepositoryError:
            raise RepositoryError("Not inside a git repository")

    def stage_all(self) -> None:
        """Stage every change in the work tree, including untracked and deleted files."""
        self._run_git('add', '--all')

    def get_status(self) -> RepositoryStatus:
        return parse_porcelain(self._run_git('status', '--porcelain=v1', '-z'))

    def get_staged_diff(self) -> str:
        """Diff of the index against HEAD."""
        return self._run_git('diff', '--staged')

    def commit(self, message: str) -> None:
        # Message goes through stdin so it is never mangled by argument quoting
        self._run_git('commit', '--file', '-', input=message)
