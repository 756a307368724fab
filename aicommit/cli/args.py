"""CLI Argument Parsing"""

import argparse
import argcomplete

from aicommit import COMMIT_TYPE_NAMES, __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ai-commit',
        description='CLI tool to auto-generate Git commit messages using AI.',
        epilog='Example: ai-commit commit --all'
    )
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    commit = subparsers.add_parser('commit', help='Generate a commit message for staged changes and commit')
    commit.add_argument('-a', '--all', dest='stage_all', action='store_true', help='Stage all changes first')
    commit.add_argument('--hint', type=str, metavar='TEXT', help='Add context: --hint "fixing the login bug"')
    commit.add_argument('-t', '--type', type=str, choices=COMMIT_TYPE_NAMES, help='Force commit type')
    commit.add_argument('--verbose', action='store_true', help='Show debug info (model, diff size, tokens used)')

    subparsers.add_parser('config', help='Show which provider and model the environment selects')
    subparsers.add_parser('completion', help='Show how to enable shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
