from dataclasses import dataclass

from shurl.constants import Site
from shurl.exceptions import InvalidShortNameError


FORBIDDEN_NAME_CHARACTERS = frozenset('/\\\0')
# Names end up unescaped in the href of the index entry
HTML_SPECIAL_CHARACTERS = frozenset('"<>')


@dataclass(frozen=True)
class ShortLinkModel:
    """Represent a short link stored as a redirect file in the site repository.

    Attributes:
        name (str):
            Short name; the redirect artifact is stored as `<name>.html`.
            Must be usable as a single path segment.
        target (str):
            The (already validated) absolute URL the short link redirects to.

    Raises:
        InvalidShortNameError:
            If `name` is empty, `.`/`..`, or contains a path separator, NUL,
            or one of `"<>`.

    Example:
        >>> link = ShortLinkModel(name='abcde', target='https://example.com/')
        >>> link.artifact_filename
        'abcde.html'
        >>> link.artifact_href
        './abcde.html'
    """

    name: str
    target: str

    def __post_init__(self):
        if not self.name or self.name in {'.', '..'}:
            raise InvalidShortNameError(f"Short name {self.name!r} is not a valid file name.")
        if any(character in FORBIDDEN_NAME_CHARACTERS for character in self.name):
            raise InvalidShortNameError(f"Short name {self.name!r} must not contain path separators.")
        if any(character in HTML_SPECIAL_CHARACTERS for character in self.name):
            raise InvalidShortNameError(f"Short name {self.name!r} must not contain '\"', '<' or '>'.")

    @property
    def artifact_filename(self) -> str:
        return f'{self.name}{Site.ARTIFACT_SUFFIX}'

    @property
    def artifact_href(self) -> str:
        return f'./{self.artifact_filename}'
