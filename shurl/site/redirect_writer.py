"""Redirect artifact writer

Every short link is served as a static HTML file `<name>.html` in the site
repository. The file redirects immediately with a `<meta http-equiv="refresh">`
tag and falls back to a plain hyperlink for clients that ignore it.

Classes:
    RedirectArtifactWriter:
        Render and write redirect artifacts into a site repository.

Example:
    >>> from shurl.models import ShortLinkModel
    >>> from shurl.site import RedirectArtifactWriter

    >>> writer = RedirectArtifactWriter(Path('/home/me/links'))
    >>> writer.write(ShortLinkModel(name='abcde', target='https://example.com/'))
    PosixPath('/home/me/links/abcde.html')
"""

import logging
from pathlib import Path

from beartype import beartype

from shurl.models import ShortLinkModel
from shurl.exceptions import ArtifactWriteError
from shurl.site.helpers import handle_filesystem_error


logger = logging.getLogger(__name__)

REDIRECT_TEMPLATE = """<html>
    <head>
        <meta http-equiv="refresh" content="0; URL={target}" />
    </head>
    <body>
        <p>Redirecting...</p>
        <p>If you are not redirected automatically, follow the link: <a href="{target}">{target}</a></p>
    </body>
</html>"""


class RedirectArtifactWriter:
    """Write client-side redirect documents into the site repository

    Attributes:
        repo_path (Path):
            Root of the site repository; artifacts are written directly into it.

    Methods:
        render(short_link: ShortLinkModel) -> str:
            Build the redirect document for a short link.

        path_for(short_link: ShortLinkModel) -> Path:
            Location of the short link's artifact.

        write(short_link: ShortLinkModel) -> Path:
            Write (create or truncate) the artifact.
            Raises ArtifactWriteError on filesystem errors.
    """

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path

    @beartype
    def render(self, short_link: ShortLinkModel) -> str:
        return REDIRECT_TEMPLATE.format(target=short_link.target)

    @beartype
    def path_for(self, short_link: ShortLinkModel) -> Path:
        return self.repo_path / short_link.artifact_filename

    @handle_filesystem_error(ArtifactWriteError, 'write redirect file')
    @beartype
    def write(self, short_link: ShortLinkModel) -> Path:
        """Write the redirect artifact for a short link

        An existing file with the same name is overwritten without warning.
        Nothing is cleaned up if writing fails halfway.

        Args:
            short_link (ShortLinkModel):
                Short link whose artifact is written.

        Returns:
            Path: location of the written artifact.

        Raises:
            ArtifactWriteError:
                If the file can't be created or written.
        """
        path = self.path_for(short_link)
        if path.exists():
            logger.warning('Overwriting existing redirect file.', extra={'artifactPath': str(path)})

        with open(path, 'w', encoding='utf-8') as artifact:
            artifact.write(self.render(short_link))

        logger.info('Wrote redirect file.', extra={'artifactPath': str(path), 'target': short_link.target})
        return path
