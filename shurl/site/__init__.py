from shurl.site.redirect_writer import RedirectArtifactWriter
from shurl.site.index_ledger import IndexLedger


__all__ = [
    'RedirectArtifactWriter',
    'IndexLedger',
]
