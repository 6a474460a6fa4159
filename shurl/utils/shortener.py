"""Short name allocation utility

This module picks the short name under which a redirect artifact is stored.
Generated names are random lowercase tokens checked against the artifacts
already present in the site repository; user-supplied names are taken as-is.

Functions:
    generate_name(length=5) -> str:
        Generate a random lowercase alphabetic token.

    allocate_name(exists, short_name=None, *, length=5, max_attempts=None) -> str:
        Return a short name that `exists` reports as free (or `short_name`).

    artifact_exists(repo_path) -> Callable[[str], bool]:
        Build the existence oracle for redirect artifacts in `repo_path`.

Example:
    >>> from shurl.utils import allocate_name, artifact_exists
    >>> allocate_name(artifact_exists(Path('~/site').expanduser()))
    'qmzrt'
    >>> allocate_name(artifact_exists(Path('~/site').expanduser()), 'blog')
    'blog'
"""

import os
import random
import string
import logging
from pathlib import Path

from shurl.types import ExistsCheck
from shurl.constants import Shortener, Site
from shurl.exceptions import NamespaceExhaustedError


logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


def generate_name(length: int = Shortener.NAME_LENGTH) -> str:
    """Generate a random short name of lowercase ASCII letters.

    Args:
        length (int, optional):
            Number of characters. Defaults to 5.

    Returns:
        str: e.g. 'kqzpa'

    Raises:
        ValueError: If `length` is not a positive integer.
    """
    if length <= 0:
        raise ValueError(f'Name length must be a positive integer (given value: {length}).')
    return ''.join(random.choices(ALPHABET, k=length))  # noqa: S311


def allocate_name(
    exists: ExistsCheck,
    short_name: str | None = None,
    *,
    length: int = Shortener.NAME_LENGTH,
    max_attempts: int | None = None,
) -> str:
    """Allocate a short name for a new redirect artifact.

    A user-supplied `short_name` is returned verbatim. It is NOT checked
    against existing artifacts, so reusing a name overwrites that artifact.

    Otherwise random names are generated until `exists` reports one as free.
    The retry loop has no bound unless `max_attempts` is given: with 26^5
    names a second collision in a personal site is practically impossible.

    Args:
        exists (Callable[[str], bool]):
            Existence oracle, True if an artifact for the name already exists.
            Errors raised by it (e.g. PermissionError) propagate to the caller.
        short_name (str | None):
            User-supplied name, bypasses generation and collision checks.
        length (int, optional):
            Length of generated names. Defaults to 5.
        max_attempts (int | None, optional):
            Give up after this many colliding candidates. Unbounded by default.

    Returns:
        str: the allocated short name.

    Raises:
        NamespaceExhaustedError:
            If `max_attempts` candidates in a row were already taken.
    """
    if short_name is not None:
        logger.debug('Using user-supplied short name.', extra={'shortName': short_name})
        return short_name

    attempts = 0
    while True:
        candidate = generate_name(length)
        attempts += 1
        if not exists(candidate):
            logger.debug('Allocated short name.', extra={'shortName': candidate, 'attempts': attempts})
            return candidate

        logger.info('Short name collision, regenerating.', extra={'shortName': candidate, 'attempts': attempts})
        if max_attempts is not None and attempts >= max_attempts:
            raise NamespaceExhaustedError(f'No free short name of length {length} found after {attempts} attempts.')


def artifact_exists(repo_path: Path) -> ExistsCheck:
    """Build an existence oracle for redirect artifacts stored in `repo_path`

    Args:
        repo_path (Path):
            Root of the site repository.

    Returns:
        Callable[[str], bool]:
            Function returning True if `<repo_path>/<name>.html` exists.
            Filesystem errors other than a missing file (e.g. PermissionError)
            propagate from it.
    """

    def exists(name: str) -> bool:
        try:
            os.stat(repo_path / f'{name}{Site.ARTIFACT_SUFFIX}')
        except FileNotFoundError:
            return False
        return True

    return exists
