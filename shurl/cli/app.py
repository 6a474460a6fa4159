import sys
import logging

import click

from shurl.models import ShortLinkModel, ShortenResult, ShurlConfig
from shurl.exceptions import ConfigNotSetUpError, ShurlError
from shurl.site import RedirectArtifactWriter, IndexLedger
from shurl.vcs import CommitBuilder, Publisher, make_publisher, open_repository
from shurl.utils import allocate_name, artifact_exists, initialize_logging, load_config, parse_url
from shurl.cli import output


logger = logging.getLogger(__name__)


def shorten_url(
    config: ShurlConfig,
    target_url: str,
    short_name: str | None = None,
    *,
    publisher: Publisher | None = None,
) -> ShortenResult:
    """Create a short link and record it in the site repository

    This pipeline follows this procedure to shorten URLs:
    - Step 1: Validate and normalize the target URL
    - Step 2: Open the site repository (before any file is touched)
    - Step 3: Allocate a short name (or take the user-supplied one)
    - Step 4: Write the redirect artifact <name>.html
    - Step 5: Append an entry to index.html
    - Step 6: Commit the working tree on top of HEAD
    - Step 7: Publish the checked-out branch to the configured remote

    Every step must succeed before the next one starts. Nothing is rolled
    back: a failure in step 5 or 6 leaves the files of the earlier steps on
    disk, uncommitted. A failed publish (step 7) is reported in the result
    and does not fail the run.

    Args:
        config (ShurlConfig):
            Loaded configuration.
        target_url (str):
            URL the short link redirects to.
        short_name (str | None):
            User-supplied short name. Used verbatim; an existing artifact
            with the same name is overwritten.
        publisher (Publisher | None):
            Publisher to use instead of the one selected by `config.publisher`.

    Returns:
        ShortenResult: the short link, new commit id and publish result.

    Raises:
        InvalidURLError, RepositoryOpenError, BadConfigurationError,
        InvalidShortNameError, ArtifactWriteError, LedgerWriteError,
        CommitError: all fatal.
        OSError: if checking for existing artifacts fails.

    Example:
        >>> result = shorten_url(config, 'https://example.com')
        >>> result.short_link
        ShortLinkModel(name='qmzrt', target='https://example.com/')
        >>> result.commit_id
        '3b18e512dba79e4c8300dd08aeb37f8e728b8dad'
    """
    # 1- Validate target URL
    target = parse_url(target_url)

    # 2- Open the site repository
    repo = open_repository(config.repo_path)
    try:
        builder = CommitBuilder(repo, config, publisher if publisher is not None else make_publisher(config, repo))

        # 3- Allocate short name
        name = allocate_name(artifact_exists(config.repo_path), short_name)
        short_link = ShortLinkModel(name=name, target=target)

        # 4- Write redirect artifact
        RedirectArtifactWriter(config.repo_path).write(short_link)

        # 5- Append entry to the index ledger
        IndexLedger(config.repo_path).append(short_link)

        # 6- Commit the snapshot
        commit_id = builder.commit(short_link.target)

        # 7- Publish
        publish_result = builder.publish()
    finally:
        repo.close()

    return ShortenResult(short_link=short_link, commit_id=commit_id, publish=publish_result)


@click.command()
@click.argument('url')
@click.argument('short_name', required=False)
def main(url: str, short_name: str | None) -> None:
    """Create a short link redirecting to URL in the configured site repository.

    A random 5-letter name is generated unless SHORT_NAME is given. A given
    SHORT_NAME is used as-is and replaces any existing link with that name.
    """
    initialize_logging()

    try:
        config = load_config()
    except ConfigNotSetUpError as e:
        output.info(str(e))
        return
    except ShurlError as e:
        output.error(str(e))
        sys.exit(1)

    try:
        result = shorten_url(config, url, short_name)
    except (ShurlError, OSError) as e:
        logger.debug('Shortening failed.', exc_info=True)
        output.error(str(e))
        sys.exit(1)

    output.plain(f'Created commit with object id: {result.commit_id}')
    output.plain(f'{result.short_link.target} -> {result.short_link.artifact_href}')

    if result.publish is not None and not result.publish.ok:
        output.warning(f'Failed to push to upstream ({result.publish.message}): try running `git push` manually')
