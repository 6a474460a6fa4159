import functools
from pathlib import Path
from typing import TypeVar, Any
from collections.abc import Callable

from dulwich.repo import Repo
from dulwich.errors import NotGitRepository, ObjectFormatException

from shurl.exceptions import CommitError, RepositoryOpenError


__all__ = ['open_repository']

F = TypeVar('F', bound=Callable[..., Any])

# Errors dulwich (and the filesystem underneath it) raise while staging and committing
VCS_ERRORS = (OSError, KeyError, ValueError, ObjectFormatException, NotGitRepository)


def open_repository(path: Path) -> Repo:
    """Open an existing git repository with a working tree

    Args:
        path (Path):
            Root directory of the repository.

    Returns:
        Repo: dulwich repository handle

    Raises:
        RepositoryOpenError:
            If `path` doesn't exist, isn't readable or isn't a git repository.
    """
    try:
        return Repo(str(path))
    except NotGitRepository as e:
        raise RepositoryOpenError(f'Failed to open repository: {path} is not a git repository.') from e
    except OSError as e:
        raise RepositoryOpenError(f'Failed to open repository {path}: {e}') from e


def handle_vcs_error(action: str) -> Callable[[F], F]:
    """Wrap repository-mutating methods to translate dulwich errors

    Args:
        action (str):
            Short description of the failed action, used in the error message.

    Returns:
        Callable[[F], F]:
            Decorator whose wrapped method raises CommitError (chained to the
            original exception) when staging, tree writing or committing fails.

    Example:
        >>> @handle_vcs_error('write tree')
        ... def write_tree(self):
        ...     return self.repo.open_index().commit(self.repo.object_store)
    """

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except VCS_ERRORS as e:
                raise CommitError(f'Failed to {action} in {self.repo.path}: {e}') from e

        return wrapper

    return decorator
