"""Git Operations Package"""

from aicommit.git.repository import GitRepository, RepositoryError, RepositoryStatus, parse_porcelain

__all__ = [
    "GitRepository",
    "RepositoryError",
    "RepositoryStatus",
    "parse_porcelain",
]
