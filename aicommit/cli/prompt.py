"""Interactive confirmation of a candidate commit message."""

from aicommit.output import RULE, bold, dim, colorize_commit_type

YES_ANSWERS = {'', 'y', 'yes'}
NO_ANSWERS = {'n', 'no'}


class PromptError(Exception):
    """Raised when the user's answer cannot be read."""
    pass


def display_message(message: str) -> None:
    """Display commit message between horizontal rules with a colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    # Width from the raw message, colored text carries ANSI codes
    width = max((len(line) for line in message.split('\n')), default=40)
    print(f"\n{dim(RULE * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def confirm_commit(message: str) -> bool:
    """Show the candidate and ask whether to use it. Enter accepts."""
    display_message(message)
    while True:
        try:
            answer = input(f"{bold('Use this commit message?')} {dim('[Y/n, n regenerates]')} ").strip().lower()
        except (EOFError, KeyboardInterrupt) as e:
            print()
            raise PromptError("Could not read confirmation from the terminal.") from e

        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        print(dim("Please answer y or n."))
