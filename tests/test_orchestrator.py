"""
Tests for the commit flow: staging decision, status checks, the
generate/confirm loop and the final commit.

Run with:
    pytest tests/test_orchestrator.py -v
"""

import pytest

from aicommit.git import RepositoryError, RepositoryStatus
from aicommit.llm import GenerationError
from aicommit.orchestrator import CommitOrchestrator, CommitOutcome, LoopState, Reporter
from aicommit.cli.prompt import PromptError


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeRepository:
    """In-memory stand-in for GitRepository that records every call."""

    def __init__(self, staged=(), unstaged=(), diff="+added line\n-removed line", commit_error=None):
        self.staged = list(staged)
        self.unstaged = list(unstaged)
        self.diff = diff
        self.commit_error = commit_error
        self.calls = []
        self.commits = []

    def stage_all(self):
        self.calls.append("stage_all")
        self.staged.extend(p for p in self.unstaged if p not in self.staged)
        self.unstaged = []

    def get_status(self):
        self.calls.append("get_status")
        return RepositoryStatus(staged=list(self.staged), unstaged=list(self.unstaged))

    def get_staged_diff(self):
        self.calls.append("get_staged_diff")
        return self.diff

    def commit(self, message):
        self.calls.append("commit")
        if self.commit_error:
            raise self.commit_error
        self.commits.append(message)


class ScriptedGenerator:
    """Returns messages from a list in order, or raises an error."""

    def __init__(self, messages=None, error=None):
        self.messages = list(messages or [])
        self.error = error
        self.inputs = []

    def generate(self, diff_text):
        self.inputs.append(diff_text)
        if self.error:
            raise self.error
        return self.messages[len(self.inputs) - 1]


class ScriptedConfirm:
    """Answers confirmation prompts from a list of booleans."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.seen = []

    def __call__(self, message):
        self.seen.append(message)
        return self.answers[len(self.seen) - 1]


class RecordingReporter(Reporter):

    def __init__(self):
        self.events = []

    def staging(self):
        self.events.append("staging")

    def regenerating(self):
        self.events.append("regenerating")


# ---------------------------------------------------------------------------
# Benign no-op outcomes
# ---------------------------------------------------------------------------

class TestNothingToDo:

    def test_no_changes_never_commits(self):
        repo = FakeRepository()
        generator = ScriptedGenerator(["feat: x"])
        result = CommitOrchestrator(repo, generator, ScriptedConfirm([True])).run()

        assert result.outcome is CommitOutcome.NO_CHANGES
        assert repo.commits == []
        assert generator.inputs == []

    def test_no_changes_with_stage_all(self):
        repo = FakeRepository()
        result = CommitOrchestrator(repo, ScriptedGenerator(), ScriptedConfirm([])).run(stage_all=True)

        assert result.outcome is CommitOutcome.NO_CHANGES
        assert repo.calls == ["stage_all", "get_status"]

    def test_unstaged_only_reports_nothing_staged(self):
        repo = FakeRepository(unstaged=["src/app.py"])
        generator = ScriptedGenerator(["feat: x"])
        result = CommitOrchestrator(repo, generator, ScriptedConfirm([True])).run()

        assert result.outcome is CommitOutcome.NOTHING_STAGED
        assert "commit" not in repo.calls
        assert "get_staged_diff" not in repo.calls
        assert generator.inputs == []


# ---------------------------------------------------------------------------
# Generate / confirm loop
# ---------------------------------------------------------------------------

class TestGenerateConfirmLoop:

    def test_accepted_first_try(self):
        repo = FakeRepository(staged=["src/core.py"], diff="+added line\n-removed line")
        generator = ScriptedGenerator(["fix(core): correct off-by-one error"])
        confirm = ScriptedConfirm([True])

        result = CommitOrchestrator(repo, generator, confirm).run()

        assert result.outcome is CommitOutcome.COMMITTED
        assert result.message == "fix(core): correct off-by-one error"
        assert generator.inputs == ["+added line\n-removed line"]
        assert repo.commits == ["fix(core): correct off-by-one error"]

    @pytest.mark.parametrize("rejections", [1, 2, 5])
    def test_n_rejections_generate_n_plus_one_times(self, rejections):
        messages = [f"feat(app): attempt {i}" for i in range(rejections + 1)]
        repo = FakeRepository(staged=["src/app.py"])
        generator = ScriptedGenerator(messages)
        confirm = ScriptedConfirm([False] * rejections + [True])

        result = CommitOrchestrator(repo, generator, confirm).run()

        assert len(generator.inputs) == rejections + 1
        assert result.attempts == rejections + 1
        assert repo.commits == [messages[-1]]

    def test_diff_is_fetched_for_every_attempt(self):
        repo = FakeRepository(staged=["src/app.py"])
        generator = ScriptedGenerator(["feat: one", "feat: two", "feat: three"])
        CommitOrchestrator(repo, generator, ScriptedConfirm([False, False, True])).run()

        assert repo.calls.count("get_staged_diff") == 3

    def test_rejected_candidate_is_not_reused(self):
        repo = FakeRepository(staged=["src/app.py"])
        generator = ScriptedGenerator(["feat: first", "fix: second"])
        confirm = ScriptedConfirm([False, True])

        CommitOrchestrator(repo, generator, confirm).run()

        assert confirm.seen == ["feat: first", "fix: second"]
        assert repo.commits == ["fix: second"]

    def test_same_text_from_generator_is_shown_again(self):
        repo = FakeRepository(staged=["src/app.py"])
        generator = ScriptedGenerator(["chore: tidy", "chore: tidy"])
        confirm = ScriptedConfirm([False, True])

        CommitOrchestrator(repo, generator, confirm).run()

        assert confirm.seen == ["chore: tidy", "chore: tidy"]
        assert len(generator.inputs) == 2

    def test_empty_diff_still_reaches_generator(self):
        repo = FakeRepository(staged=["src/app.py"], diff="")
        generator = ScriptedGenerator(error=GenerationError("nothing to describe"))

        with pytest.raises(GenerationError):
            CommitOrchestrator(repo, generator, ScriptedConfirm([True])).run()

        assert generator.inputs == [""]
        assert repo.commits == []

    def test_reporter_sees_each_regeneration(self):
        repo = FakeRepository(staged=["src/app.py"])
        reporter = RecordingReporter()
        generator = ScriptedGenerator(["feat: a", "feat: b", "feat: c"])
        CommitOrchestrator(repo, generator, ScriptedConfirm([False, False, True]), reporter).run()

        assert reporter.events == ["regenerating", "regenerating"]

    def test_state_ends_accepted(self):
        repo = FakeRepository(staged=["src/app.py"])
        orchestrator = CommitOrchestrator(repo, ScriptedGenerator(["feat: a"]), ScriptedConfirm([True]))
        orchestrator.run()
        assert orchestrator.state is LoopState.ACCEPTED


# ---------------------------------------------------------------------------
# Staging
# ---------------------------------------------------------------------------

class TestStageAll:

    def test_stage_all_then_generates(self):
        repo = FakeRepository(unstaged=["src/a.py", "src/b.py"])
        reporter = RecordingReporter()
        generator = ScriptedGenerator(["feat: add a and b"])

        result = CommitOrchestrator(repo, generator, ScriptedConfirm([True]), reporter).run(stage_all=True)

        assert repo.calls[:2] == ["stage_all", "get_status"]
        assert repo.staged == ["src/a.py", "src/b.py"]
        assert result.outcome is CommitOutcome.COMMITTED
        assert reporter.events[0] == "staging"

    def test_stage_failure_aborts_before_status(self):
        class BrokenStage(FakeRepository):
            def stage_all(self):
                raise RepositoryError("index.lock exists")

        repo = BrokenStage(unstaged=["src/a.py"])
        with pytest.raises(RepositoryError, match="index.lock"):
            CommitOrchestrator(repo, ScriptedGenerator(["feat: a"]), ScriptedConfirm([True])).run(stage_all=True)

        assert repo.calls == []


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestFailures:

    def test_generation_failure_never_commits(self):
        repo = FakeRepository(staged=["src/app.py"])
        orchestrator = CommitOrchestrator(
            repo, ScriptedGenerator(error=GenerationError("rate limited")), ScriptedConfirm([True])
        )

        with pytest.raises(GenerationError, match="rate limited"):
            orchestrator.run()

        assert "commit" not in repo.calls
        assert orchestrator.state is LoopState.ABORTED

    def test_generation_failure_after_rejection_is_not_retried(self):
        class FailsSecondTime(ScriptedGenerator):
            def generate(self, diff_text):
                self.inputs.append(diff_text)
                if len(self.inputs) > 1:
                    raise GenerationError("connection reset")
                return "feat: first"

        repo = FakeRepository(staged=["src/app.py"])
        generator = FailsSecondTime()

        with pytest.raises(GenerationError):
            CommitOrchestrator(repo, generator, ScriptedConfirm([False, True])).run()

        assert len(generator.inputs) == 2
        assert repo.commits == []

    def test_prompt_failure_propagates(self):
        def closed_stdin(message):
            raise PromptError("stdin closed")

        repo = FakeRepository(staged=["src/app.py"])
        with pytest.raises(PromptError):
            CommitOrchestrator(repo, ScriptedGenerator(["feat: a"]), closed_stdin).run()

        assert repo.commits == []

    def test_commit_failure_propagates_and_keeps_staging(self):
        repo = FakeRepository(unstaged=["src/app.py"], commit_error=RepositoryError("nothing to commit"))

        with pytest.raises(RepositoryError):
            CommitOrchestrator(repo, ScriptedGenerator(["feat: a"]), ScriptedConfirm([True])).run(stage_all=True)

        assert repo.staged == ["src/app.py"]
        assert repo.calls[-1] == "commit"
