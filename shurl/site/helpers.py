import functools
from typing import TypeVar, Any
from collections.abc import Callable

from shurl.exceptions import SiteError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_filesystem_error(error: type[SiteError], action: str) -> Callable[[F], F]:
    """Wrap site-writing methods to translate filesystem errors

    Args:
        error (type[SiteError]):
            Exception class raised in place of the OSError.
        action (str):
            Short description of the failed action, used in the error message.

    Returns:
        Callable[[F], F]:
            Decorator whose wrapped method raises `error` (chained to the
            original OSError) on any filesystem failure.

    Example:
        >>> @handle_filesystem_error(ArtifactWriteError, 'write redirect file')
        ... def write(self, short_link):
        ...     (self.repo_path / short_link.artifact_filename).write_text('...')
    """

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except OSError as e:
                location = e.filename or self.repo_path
                reason = e.strerror or str(e)
                raise error(f'Failed to {action} {location}: {reason}') from e

        return wrapper

    return decorator
