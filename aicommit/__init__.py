"""
AI Commit

Propose a commit message for staged git changes and commit it once approved.
"""

__version__ = "1.0.0"

# Conventional commit types - single source of truth
# Used by: llm/base.py (system prompt), llm/generator.py (cleanup), cli/args.py, output
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'perf': 'Performance improvement',
    'test': 'Adding or updating tests',
    'build': 'Build system or external dependency changes',
    'ci': 'CI/CD configuration changes',
    'chore': 'Maintenance tasks, dependencies, tooling',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
