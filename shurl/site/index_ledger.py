"""Append-only index of every short link in the site repository

`index.html` gets one line per short link, in creation order:

    https://example.com/: <a href="./abcde.html">./abcde.html</a><br/>

Entries are only ever appended. Existing content is never read back during
an append, never deduplicated and never reordered.

Classes:
    IndexLedger:
        Append entries to (and read entries from) the site's index.html.
"""

import re
import logging
from pathlib import Path

from beartype import beartype

from shurl.constants import Site
from shurl.models import ShortLinkModel
from shurl.exceptions import LedgerWriteError
from shurl.site.helpers import handle_filesystem_error


logger = logging.getLogger(__name__)

ENTRY_TEMPLATE = '\n{target}: <a href="{href}">{href}</a><br/>'
ENTRY_PATTERN = re.compile(r'^(?P<target>.+): <a href="(?P<href>[^"]*)">(?P=href)</a><br/>$')


class IndexLedger:
    """Human-readable ledger of short links stored in `<repo_path>/index.html`

    Attributes:
        repo_path (Path):
            Root of the site repository.

    Methods:
        append(short_link: ShortLinkModel) -> str:
            Append one entry for the short link, creating index.html if needed.
            Raises LedgerWriteError on filesystem errors.

        entries() -> list[tuple[str, str]]:
            Read back all (target, artifact href) entries in ledger order.
    """

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path

    @property
    def path(self) -> Path:
        return self.repo_path / Site.INDEX_FILENAME

    @handle_filesystem_error(LedgerWriteError, 'append to')
    @beartype
    def append(self, short_link: ShortLinkModel) -> str:
        """Append an entry for a short link to the ledger

        Args:
            short_link (ShortLinkModel):
                The newly created short link.

        Returns:
            str: the exact text appended (starts with a newline).

        Raises:
            LedgerWriteError:
                If index.html can't be opened or written.
        """
        entry = ENTRY_TEMPLATE.format(target=short_link.target, href=short_link.artifact_href)
        with open(self.path, 'a', encoding='utf-8') as ledger:
            ledger.write(entry)

        logger.info('Appended index entry.', extra={'indexPath': str(self.path), 'shortName': short_link.name})
        return entry

    def entries(self) -> list[tuple[str, str]]:
        """Read all ledger entries in creation order

        Lines that don't look like entries (e.g. hand-written HTML around
        them) are skipped. A missing index.html has no entries.

        Returns:
            list[tuple[str, str]]: (target URL, artifact href) pairs
        """
        if not self.path.exists():
            return []

        with open(self.path, encoding='utf-8') as ledger:
            lines = ledger.read().splitlines()

        return [(m['target'], m['href']) for m in map(ENTRY_PATTERN.match, lines) if m]
