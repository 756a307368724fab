"""CLI Main Entry Point"""

from aicommit.config import ConfigError, load_config
from aicommit.git import GitRepository, RepositoryError
from aicommit.llm import GenerationError, MessageGenerator, get_client
from aicommit.orchestrator import CommitOrchestrator, CommitOutcome
from aicommit.output import dim, print_error, print_success, print_warning
from aicommit.prompts import PromptConfig

from aicommit.cli.args import parse_args
from aicommit.cli.commands import display_config, run_install_completion
from aicommit.cli.prompt import PromptError, confirm_commit
from aicommit.cli.reporter import ConsoleReporter

OUTCOME_MESSAGES = {
    CommitOutcome.NO_CHANGES: "No changes to commit.",
    CommitOutcome.NOTHING_STAGED: "No staged changes to commit. Stage changes or use the --all flag.",
}


def run_commit(args) -> int:
    """Wire up the collaborators and run the commit flow.

    Config is resolved before git is touched, so a missing key never
    stages anything.
    """
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        return 1

    try:
        repository = GitRepository()
        client = get_client(config)
        generator = MessageGenerator(client, PromptConfig(hint=args.hint, forced_type=args.type))
        reporter = ConsoleReporter(client.name, generator, verbose=args.verbose)
        orchestrator = CommitOrchestrator(repository, generator, confirm_commit, reporter)

        result = orchestrator.run(stage_all=args.stage_all)
    except (RepositoryError, GenerationError, PromptError) as e:
        print_error(f"Error during commit process: {e}")
        return 1
    except KeyboardInterrupt:
        print()
        print(dim("Cancelled."))
        return 1

    if result.outcome is CommitOutcome.COMMITTED:
        print_success("Commit created successfully!")
    else:
        print_warning(OUTCOME_MESSAGES[result.outcome])
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.command == 'config':
        return display_config()
    if args.command == 'completion':
        return run_install_completion()
    return run_commit(args)
